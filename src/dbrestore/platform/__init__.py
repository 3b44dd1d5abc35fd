"""Platform adapters shared across features."""
