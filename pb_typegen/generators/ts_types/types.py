"""Dataclasses and enums for TypeScript type generation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class FieldType(str, Enum):
    """PocketBase field type tags understood by the mapper."""
    TEXT = "text"
    NUMBER = "number"
    BOOL = "bool"
    EMAIL = "email"
    URL = "url"
    DATE = "date"
    AUTODATE = "autodate"
    SELECT = "select"
    FILE = "file"
    PASSWORD = "password"
    JSON = "json"
    RELATION = "relation"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value):
        if value == "boolean":
            return cls.BOOL
        return cls.UNKNOWN


# Collection id -> canonical interface name
NameResolutionTable = Dict[str, str]


@dataclass
class EmittedExpandInterface:
    """Relation fields of a collection, every member optional."""
    name: str
    fields: List[Tuple[str, str]] = field(default_factory=list)


@dataclass
class EmittedInterface:
    """One interface per collection, extending Base."""
    name: str
    fields: List[Tuple[str, str]] = field(default_factory=list)
    expand: Optional[EmittedExpandInterface] = None
