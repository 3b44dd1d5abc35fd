"""Application layer wiring adapters into use cases."""
