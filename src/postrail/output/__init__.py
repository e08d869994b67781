"""Output layer — maps Outcome values to external responses and renders them."""
