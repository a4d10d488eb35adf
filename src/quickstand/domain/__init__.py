"""Domain models and pure helpers (no I/O)."""
