"""Remote repository models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Protocol(str, Enum):
    """Scheme used for generated web URLs."""

    HTTP = "http"
    HTTPS = "https"


class ParsedRemoteUrl(BaseModel):
    """Structured fields of a git remote URL.

    ``protocol`` is the transport of the remote itself (ssh, git, http,
    https, file), not the scheme of the generated web links.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str
    resource: str
    source: str
    port: int | None = None
    owner: str
    name: str
    full_name: str
    user: str | None = None


class RemoteDescriptor(BaseModel):
    """Where the hosting service lives and which ref to link to."""

    model_config = ConfigDict(frozen=True)

    protocol: Protocol = Protocol.HTTPS
    host: str = Field(min_length=1)
    port: int | None = None
    path_to_repo: str = Field(min_length=1)
    branch: str = Field(min_length=1)

    @property
    def netloc(self) -> str:
        if self.port is None:
            return self.host
        return f"{self.host}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.protocol.value}://{self.netloc}"
