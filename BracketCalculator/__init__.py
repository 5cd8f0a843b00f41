"""Four-function calculator with bracket support."""
