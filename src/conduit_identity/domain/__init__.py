"""Domain layer for Conduit identity."""
