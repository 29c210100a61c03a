"""Application layer: user service, request guard and their error values."""
