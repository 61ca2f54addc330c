"""Resolver configuration models."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from remote_url.core.models.template import ServiceTemplate


class ResolverConfig(BaseModel):
    """Options accepted by ``initialize``.

    Mirrors the plugin options of the host site generator; unknown keys
    are rejected so that typos fail at build time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    vcs: str | None = Field(
        default=None, description="VCS name (git, mercurial, subversion); auto-detect if unset"
    )
    service: str | None = Field(
        default=None, description="Hosting service override; auto-detect if unset"
    )
    remote: str = Field(default="origin", min_length=1, description="Remote name")
    https: bool = Field(default=True, description="Use https:// for generated links")

    templates: dict[str, ServiceTemplate] = Field(
        default_factory=dict, description="Extra hosting service templates by name"
    )
    cwd: str | None = Field(
        default=None, description="Directory to probe for a repository (default: cwd)"
    )
    process_timeout: float = Field(
        default=10.0, gt=0, description="Seconds before a VCS command is abandoned"
    )

    @field_validator("vcs", "service")
    @classmethod
    def _normalize_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().lower()
        return value or None
