"""Reference server adapter for the products collection."""
