"""Output schemas for identity commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class IdentityShowOutput(BaseOutputSchema):
    """Output schema for identity show command.

    Output structure:
    - identities: path -> {"identity": token, "resolved": path found for the token}
      Paths that could not be resolved are absent and reported in errors.
    """

    identities: dict[str, dict[str, str]] = Field(..., description="Identity token and resolved path per input path")


register_output_schema("identity", "show", IdentityShowOutput)
