"""Pydantic models describing the regional source payload."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from regionalsync.domain.model import NAME_MAX_LENGTH


class RegionalSourceBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RegionalPayload(RegionalSourceBaseModel):
    """One record of the upstream list.

    Only ``name`` matters; upstreams that still publish the legacy ``nome`` key
    are accepted as well. Names longer than the stored column are rejected.
    """

    name: str = Field(
        validation_alias=AliasChoices("name", "nome"), max_length=NAME_MAX_LENGTH
    )

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name")
    @classmethod
    def _require_name(cls, value: str) -> str:
        if not value:
            raise ValueError("name must not be blank")
        return value
