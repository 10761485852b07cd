class InvalidArgument(ValueError):
    """Raised when an element cannot be stored in the tree (e.g. None)."""
