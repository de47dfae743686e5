"""Utility functions for TypeScript type generation."""
import re
from typing import Iterable

from pb_typegen.generators.ts_types.types import NameResolutionTable
from pb_typegen.schemas.collections import CollectionDescriptor

_WORD_RE = re.compile(r"[a-zA-Z0-9]+")


def to_pascal_case(name: str) -> str:
    """Convert a collection name like user_profiles to PascalCase (UserProfiles)."""
    return "".join(word[0].upper() + word[1:] for word in _WORD_RE.findall(name))


def build_name_table(collections: Iterable[CollectionDescriptor]) -> NameResolutionTable:
    """Map each non-view collection id to its interface name."""
    return {c.id: to_pascal_case(c.name) for c in collections if not c.is_view}
