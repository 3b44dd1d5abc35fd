"""User interface layers for dbrestore."""
