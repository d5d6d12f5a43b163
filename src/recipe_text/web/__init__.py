"""Web surface for recipe text parsing."""
