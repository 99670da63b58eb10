"""Identity resolution failure."""


class IdentityError(Exception):
    """Raised when a path or identity cannot be resolved unambiguously."""
