"""Feature packages for dbrestore."""
