"""Configuration package for dbrestore."""
