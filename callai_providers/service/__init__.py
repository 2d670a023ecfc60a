"""Service layer (command-line interface)."""
