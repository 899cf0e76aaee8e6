"""Error handling and performance helpers."""
