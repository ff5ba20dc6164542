from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class DocumentBody(BaseModel):
    """Request body stored as a Mongo document; unknown fields are kept as sent."""

    model_config = ConfigDict(extra="allow")

    @model_validator(mode="before")
    @classmethod
    def reject_id(cls, data: Any) -> Any:
        # _id is assigned by the database and immutable afterwards
        if isinstance(data, dict) and "_id" in data:
            raise ValueError("_id cannot be set by the client")
        return data
