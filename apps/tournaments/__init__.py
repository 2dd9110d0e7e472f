"""Club tournaments (read-only API, managed through the admin)."""
