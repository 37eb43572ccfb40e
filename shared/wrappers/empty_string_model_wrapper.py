import re
from typing import Any, Optional
from pydantic import BaseModel, model_validator

# Direction marks and BOMs pasted in from spreadsheets
INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def clean_text(value: str) -> Optional[str]:
    cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
    return cleaned or None


def deep_clean(value: Any):
    """Strip text inputs and turn blank ones into None, walking dicts and lists."""
    if isinstance(value, str):
        return clean_text(value)
    if isinstance(value, dict):
        return {key: deep_clean(item) for key, item in value.items()}
    if isinstance(value, list):
        return [deep_clean(item) for item in value]
    return value


class EmptyStringModel(BaseModel):
    """Input model where "" and whitespace-only text arrive as missing values."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        return deep_clean(values) if isinstance(values, dict) else values
