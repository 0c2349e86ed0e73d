"""CSV ingestion and row validation helpers."""
