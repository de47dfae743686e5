"""Map PocketBase field descriptors to TypeScript type expressions."""
from typing import Optional

from pb_typegen.generators.ts_types.types import FieldType, NameResolutionTable
from pb_typegen.schemas.collections import FieldDescriptor

FALLBACK_TYPE = "string"


def _array_if_multi(base_type: str, field: FieldDescriptor) -> str:
    return f"{base_type}[]" if field.max_select > 1 else base_type


def resolve_relation_type(field: FieldDescriptor, name_table: NameResolutionTable) -> Optional[str]:
    """Return the target interface type of a relation, or None when the target is unknown."""
    target_id = field.options.collectionId
    if not target_id:
        return None
    target_name = name_table.get(target_id)
    if target_name is None:
        return None
    return _array_if_multi(target_name, field)


def _map_scalar_type(field: FieldDescriptor, field_type: FieldType) -> str:
    """Map a non-relation field to its base type (returns base type, no null union)."""
    if field_type in (
        FieldType.TEXT,
        FieldType.EMAIL,
        FieldType.URL,
        FieldType.DATE,
        FieldType.AUTODATE,
        FieldType.PASSWORD,
    ):
        return "string"
    if field_type == FieldType.NUMBER:
        return "number"
    if field_type == FieldType.BOOL:
        return "boolean"
    if field_type in (FieldType.SELECT, FieldType.FILE):
        return _array_if_multi("string", field)
    # json and anything unrecognized
    return "any"


def map_field_type(field: FieldDescriptor, name_table: NameResolutionTable) -> str:
    """
    Map a field descriptor to a TypeScript type expression.

    Relation fields resolve to the target interface (array-wrapped when
    maxSelect > 1) or fall back to string, and are never null-unioned.
    Every other field becomes "<type> | null" unless it is required.
    """
    field_type = FieldType(field.type)

    if field_type == FieldType.RELATION:
        return resolve_relation_type(field, name_table) or FALLBACK_TYPE

    base_type = _map_scalar_type(field, field_type)
    return base_type if field.required else f"{base_type} | null"
