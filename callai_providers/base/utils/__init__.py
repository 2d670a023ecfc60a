"""Pure helpers shared by provider adapters (no I/O)."""
