"""Infrastructure adapters for conduit_identity."""
