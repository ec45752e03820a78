"""Error types, settings and platform capability checks."""
