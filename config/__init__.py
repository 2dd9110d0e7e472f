"""Top-level package for Django configuration.

This package exposes application configuration for the padel club API. It
contains settings modules for different environments, the database router
for the catalog store and entry points for WSGI and ASGI.
"""
