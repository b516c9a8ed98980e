"""Section model for structural blocks of analyzed document text."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class SectionType(str, Enum):
    TEXT = "text"
    TABLE = "table"
    KEYVALUE = "keyvalue"
    LIST = "list"


class Section(BaseModel):
    """A run of lines sharing one structural type (plain text, table, key/value pairs or list)."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Trimmed section text, marker line included")
    type: SectionType = Field(default=SectionType.TEXT, description="Structural type of the section")
