"""Instance Schemas — typed request/response models for /instance.

Invariants:
    - InstanceCreate accepts missing username/binaryWeeks as empty (absent or
      null) so the validator reports MISSING_FIELDS instead of a generic shape error
    - binaryWeeks elements must be JSON strings (no int coercion)
    - Responses serialize with camelCase aliases

Design Decisions:
    - populate_by_name: tests and services may build models with snake_case names
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InstanceCreate(BaseModel):
    """POST /instance body."""
    model_config = ConfigDict(populate_by_name=True)

    instance_id: str | None = Field(None, alias="instanceId")
    username: str = ""
    binary_weeks: list[str] = Field(default_factory=list, alias="binaryWeeks")

    @field_validator("username", "binary_weeks", mode="before")
    @classmethod
    def null_as_empty(cls, v, info):
        """JSON null reads as the empty value, like an absent key."""
        if v is None:
            return "" if info.field_name == "username" else []
        return v


class InstanceCreated(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    instance_id: str = Field(alias="instanceId")


class InstanceView(BaseModel):
    """One record as returned by GET /instance/{id}."""
    model_config = ConfigDict(populate_by_name=True)

    instance_id: str = Field(alias="instanceId")
    username: str
    binary_weeks: list[str] = Field(alias="binaryWeeks")
    creation_date: str = Field(alias="creationDate")


class DeleteConfirmation(BaseModel):
    message: str = "Record deleted successfully"
