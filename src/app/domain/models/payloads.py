from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    @field_validator("description", check_fields=False)
    @classmethod
    def _empty_description_is_absent(cls, value: str | None) -> str | None:
        return value or None


class TaskPayload(_WireModel):
    """Body of a create request."""

    custom_id: str = Field(description="Client-chosen identifier.")
    name: str
    description: str | None = None
    date_created: str


class TaskUpdatePayload(_WireModel):
    """Body of an update request. The identifier comes from the path."""

    name: str
    description: str | None = None
    date_created: str
