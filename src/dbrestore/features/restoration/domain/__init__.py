"""Domain types for the restoration feature."""
