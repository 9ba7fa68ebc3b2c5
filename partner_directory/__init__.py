"""Partner directory: partners joined with their solutions, refreshed periodically."""

__version__ = "0.1.0"
