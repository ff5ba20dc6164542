# thrive/serialize.py
from bson import ObjectId
from bson.errors import InvalidId

from thrive.core.error_messages import ErrorResponses


def serialize_doc(doc):
    """Return a JSON-friendly copy of a Mongo document (ObjectId -> str)."""
    if doc is None:
        return None
    return {key: str(value) if isinstance(value, ObjectId) else value for key, value in doc.items()}


def serialize_list(docs):
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value: str) -> ObjectId:
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ErrorResponses.INVALID_ID
