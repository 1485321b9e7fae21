"""Core matrix type and validation helpers."""
