class InvalidInput(ValueError):
    """Malformed valuation input, e.g. missing or non-positive square footage."""
