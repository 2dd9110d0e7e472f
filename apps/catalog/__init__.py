"""Static catalog: club articles and the racket shop.

Stored in the ``catalog`` database alias (see ``config.db_routers``).
"""
