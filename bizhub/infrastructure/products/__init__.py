"""Products infrastructure: HTTP routes for the product catalogue."""
