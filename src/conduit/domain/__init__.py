"""Domain layer shared across Conduit packages."""
