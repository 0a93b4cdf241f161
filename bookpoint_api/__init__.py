"""BookPoint API - health service."""
