"""Storage service connectors."""
