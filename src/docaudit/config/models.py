"""Pydantic models for the house-style configuration.

These models validate and type the JSON configuration file that drives
the document rules and the link-check policy.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Meta
# ---------------------------------------------------------------------------


class MetaData(BaseModel):
    """Metadata about the house style being enforced."""

    name: str = "Modular documentation"
    description: str = "Conventions for modular AsciiDoc documentation sets"


# ---------------------------------------------------------------------------
# Document validation
# ---------------------------------------------------------------------------


class ValidatorSettings(BaseModel):
    """Inputs for the document rules."""

    context_placeholder: str = Field(
        default="{context}",
        min_length=1,
        description="Token every ID must embed to stay reusable across assemblies.",
    )
    abbreviations: dict[str, str] = Field(
        default_factory=dict,
        description="Abbreviation -> expansion; headings must use the abbreviation.",
    )
    deprecated_terms: dict[str, str] = Field(
        default_factory=dict,
        description="Old product name -> current name.",
    )
    attributes_path: str = Field(
        default="_attributes/attributes.adoc",
        min_length=1,
        description="Canonical subpath every attribute file must live at.",
    )

    @field_validator("attributes_path")
    @classmethod
    def _normalize_subpath(cls, v: str) -> str:
        return v.replace("\\", "/").strip("/")


# ---------------------------------------------------------------------------
# Link checking
# ---------------------------------------------------------------------------


class LinkCheckSettings(BaseModel):
    """Probe policy for external links."""

    connect_timeout: float = Field(default=5.0, gt=0, description="Seconds.")
    read_timeout: float = Field(default=30.0, gt=0, description="Seconds.")
    retries: int = Field(default=3, ge=0, le=10)
    retry_status_codes: list[int] = Field(
        default_factory=lambda: [408, 429, 500, 502, 503, 504],
    )
    user_agent: str = (
        "Mozilla/5.0 (X11; Fedora; Linux x86_64; rv:65.0) Gecko/20100101 Firefox/65.0"
    )
    ipv4_only: bool = True
    verify_tls: bool = False
    fail_on_http_error: bool = Field(
        default=False,
        description="Treat HTTP status >= 400 as unreachable instead of reachable.",
    )
    placeholder_hosts: list[str] = Field(
        default_factory=lambda: [
            "localhost",
            "127.0.0.1",
            "::1",
            "example.com",
            "example.org",
            "example.net",
            "example.edu",
        ],
        description="Hosts dropped at extraction time; never probed nor reported.",
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


class HouseStyleConfig(BaseModel):
    """Complete docaudit configuration."""

    metadata: MetaData = Field(default_factory=MetaData)
    validator: ValidatorSettings = Field(default_factory=ValidatorSettings)
    links: LinkCheckSettings = Field(default_factory=LinkCheckSettings)
