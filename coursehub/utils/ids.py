# External package imports
from bson import ObjectId


def is_valid_id(value: object) -> bool:
    """True if value is a 24-hex-character ObjectId string"""
    return isinstance(value, str) and ObjectId.is_valid(value)


def normalize_id(value: str) -> str:
    """
    Canonical lower-case form of an ObjectId string

    Stored references are compared as plain strings, so every ID taken from
    a request goes through here first.

    Raises:
        ValueError: If value is not an ObjectId string
    """
    if not is_valid_id(value):
        raise ValueError(f"Invalid ID: {value!r}")
    return str(ObjectId(value))
