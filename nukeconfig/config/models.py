"""Pydantic models describing the raw configuration document."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .types import IAM_USERS, S3


class RawModel(BaseModel):
    """Base for raw models: unknown keys are ignored, fields are read-only."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class FilterRuleModel(RawModel):
    """Raw names_regex list for one direction, patterns kept as plain strings."""

    names_regex: list[str] = Field(default_factory=list)

    @field_validator("names_regex", mode="before")
    @classmethod
    def empty_when_null(cls, v: Any) -> Any:
        """Treat ``names_regex:`` with no value as an empty list."""
        return [] if v is None else v


class ResourceTypeModel(RawModel):
    """Raw include/exclude pair for a resource category."""

    include: FilterRuleModel = Field(default_factory=FilterRuleModel)
    exclude: FilterRuleModel = Field(default_factory=FilterRuleModel)

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def empty_rule_when_null(cls, v: Any) -> Any:
        return {} if v is None else v


class ConfigFile(RawModel):
    """Top-level configuration file structure."""

    s3: ResourceTypeModel = Field(default_factory=ResourceTypeModel, alias=S3)
    iam_users: ResourceTypeModel = Field(default_factory=ResourceTypeModel, alias=IAM_USERS)

    @field_validator("s3", "iam_users", mode="before")
    @classmethod
    def empty_resource_type_when_null(cls, v: Any) -> Any:
        return {} if v is None else v
