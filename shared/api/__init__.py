"""Shared REST plumbing: error taxonomy, response envelope, pagination, middleware."""
