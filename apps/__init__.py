"""Django apps of the padel club backend."""
