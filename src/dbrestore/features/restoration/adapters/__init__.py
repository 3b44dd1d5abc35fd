"""Adapters connecting the restoration use cases to concrete backends."""
