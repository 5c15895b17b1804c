"""Products context: products, pricing and product media."""
