"""Contract bindings."""
