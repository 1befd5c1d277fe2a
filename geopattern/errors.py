class InvalidConfiguration(ValueError):
    """Raised when pattern options cannot produce a pattern."""
