"""Pydantic models describing roster files handed to the CLI."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def _none_to_blank(value: object) -> object:
    if value is None:
        return ""
    return value


class RosterBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MaintainerPayload(RosterBaseModel):
    id: int | str
    github: str = Field(
        default="",
        validation_alias=AliasChoices("github", "handle", "github_account", "gitHubAccount"),
    )
    name: str = ""

    _normalize_blank = field_validator("github", "name", mode="before")(_none_to_blank)


class RosterFile(RosterBaseModel):
    project: str | None = None
    reference_url: str = Field(
        default="",
        validation_alias=AliasChoices("reference_url", "maintainer_ref", "legacyMaintainerRef"),
    )
    maintainers: list[MaintainerPayload] = Field(default_factory=list["MaintainerPayload"])

    _normalize_blank = field_validator("reference_url", mode="before")(_none_to_blank)
