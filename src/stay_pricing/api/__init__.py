"""REST API for the pricing engine."""
