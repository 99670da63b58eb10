"""Merge configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class MergeConfig(BaseModel):
    """How links are recognised and how the merged document is laid out."""

    model_config = ConfigDict(extra="forbid")

    suffixes: list[str] = Field(default_factory=lambda: [".md"], min_length=1, description="Markdown suffixes of link targets")
    page_break: str = Field("\\newpage", description="Marker written after each file")
    identity_prefix: str = Field("n", description="Letters placed before file identities in anchors")
    local_links: bool = Field(False, description="Also check and rewrite ](#label) links")

    @field_validator("suffixes")
    @classmethod
    def _check_suffixes(cls, value: list[str]) -> list[str]:
        for suffix in value:
            if not suffix.startswith(".") or len(suffix) < 2:
                raise ValueError(f"suffix must look like '.md', got {suffix!r}")
        return value

    @field_validator("identity_prefix")
    @classmethod
    def _check_identity_prefix(cls, value: str) -> str:
        if not value.isascii() or not value.isalpha():
            raise ValueError(f"identity_prefix must be non-empty ASCII letters, got {value!r}")
        return value
