"""One-class-per-file adapter bases; import from ``base.adapters``."""
