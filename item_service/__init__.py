"""Item Service: CRUD over items plus concurrent batch processing."""
