"""Database routing between the dynamic club store and the static catalog."""

from __future__ import annotations

CATALOG_APP_LABELS = frozenset({"catalog"})
CATALOG_DB_ALIAS = "catalog"


class CatalogRouter:
    """Send catalog models to the `catalog` alias and everything else to `default`."""

    def db_for_read(self, model, **hints):  # type: ignore
        if model._meta.app_label in CATALOG_APP_LABELS:
            return CATALOG_DB_ALIAS
        return "default"

    def db_for_write(self, model, **hints):  # type: ignore
        return self.db_for_read(model, **hints)

    def allow_relation(self, obj1, obj2, **hints):  # type: ignore
        # Catalog rows never reference club rows through foreign keys.
        in_catalog = {
            obj1._meta.app_label in CATALOG_APP_LABELS,
            obj2._meta.app_label in CATALOG_APP_LABELS,
        }
        return len(in_catalog) == 1

    def allow_migrate(self, db, app_label, model_name=None, **hints):  # type: ignore
        if app_label in CATALOG_APP_LABELS:
            return db == CATALOG_DB_ALIAS
        return db == "default"
