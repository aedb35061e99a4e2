"""Core logic for the Item Service: batch processing, errors, logging."""
