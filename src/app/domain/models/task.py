from typing import NewType

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

StoreKey = NewType("StoreKey", str)
CustomId = NewType("CustomId", str)


class Task(BaseModel):
    """A unit of work as seen by clients, plus the key the store assigned to it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    store_key: StoreKey | None = Field(
        default=None,
        exclude=True,
        description="Key assigned by the store on insert. Never sent over the wire.",
    )
    custom_id: CustomId = Field(description="Client-chosen identifier.")
    name: str = Field(description="Task name.")
    description: str | None = Field(default=None, description="Optional description.")
    date_created: str = Field(description="Creation timestamp supplied by the client.")
