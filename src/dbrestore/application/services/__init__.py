"""Application services exposed to the CLI."""
