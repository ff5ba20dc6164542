# Write results shaped like the MongoDB driver acknowledgements the frontend expects
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _MongoResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    acknowledged: bool = True


class InsertResult(_MongoResult):
    inserted_id: str

    @classmethod
    def from_mongo(cls, result):
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResult(_MongoResult):
    matched_count: int
    modified_count: int
    upserted_count: int = 0
    upserted_id: Optional[str] = None

    @classmethod
    def from_mongo(cls, result):
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=0 if upserted_id is None else 1,
            upserted_id=None if upserted_id is None else str(upserted_id),
        )


class DeleteResult(_MongoResult):
    deleted_count: int

    @classmethod
    def from_mongo(cls, result):
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
