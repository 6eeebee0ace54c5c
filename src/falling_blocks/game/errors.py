from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a game cannot be built from the requested settings."""
