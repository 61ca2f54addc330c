"""Hosting service URL template model."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceTemplate(BaseModel):
    """Path tags a hosting service uses for each link kind.

    A link is built as ``/{path_to_repo}/{tag}/{branch}/{file_path}``;
    ``edit_query`` is appended verbatim to the edit link.
    """

    model_config = ConfigDict(frozen=True)

    view: str = Field(default="blob", min_length=1)
    raw: str = Field(default="raw", min_length=1)
    edit: str = Field(default="edit", min_length=1)
    blame: str = Field(default="blame", min_length=1)
    history: str = Field(default="commits", min_length=1)
    edit_query: str = ""
