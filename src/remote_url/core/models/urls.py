"""Generated URL models."""

from pydantic import BaseModel, ConfigDict


class UrlSet(BaseModel):
    """The five web links for one tracked file."""

    model_config = ConfigDict(frozen=True)

    view: str
    raw: str
    edit: str
    blame: str
    history: str
