"""Identity API domain."""

from .._output_schemas.identity import IdentityShowOutput
from .FileIdentity import FileIdentity
from .identity_of import identity_of
from .IdentityError import IdentityError
from .path_of_identity import path_of_identity

__all__ = [
    "FileIdentity",
    "IdentityError",
    "IdentityShowOutput",
    "identity_of",
    "path_of_identity",
]
