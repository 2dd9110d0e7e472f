"""Cross-app building blocks: value objects and the API error/response layer."""
