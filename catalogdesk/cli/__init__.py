"""Command-line frontend for the catalog store."""
