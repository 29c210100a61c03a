"""Conduit API core."""
