"""Orchestrator for TypeScript type generation."""
import logging
from datetime import datetime
from typing import Iterable, List, Optional

from pb_typegen.core.workflow import TypegenStage
from pb_typegen.generators.ts_types.mapper import map_field_type, resolve_relation_type
from pb_typegen.generators.ts_types.render import BASE_FIELDS, render_types
from pb_typegen.generators.ts_types.types import (
    EmittedExpandInterface,
    EmittedInterface,
    FieldType,
    NameResolutionTable,
)
from pb_typegen.generators.ts_types.utils import build_name_table, to_pascal_case
from pb_typegen.schemas.collections import CollectionDescriptor

log = logging.getLogger(__name__)


def build_interface(collection: CollectionDescriptor, name_table: NameResolutionTable) -> EmittedInterface:
    """Build the interface (and expand shape, if any) for one collection with fields."""
    interface = EmittedInterface(name=to_pascal_case(collection.name))
    relation_fields = []

    for field in collection.fields or []:
        # Base fields are declared once on Base
        if field.name in BASE_FIELDS:
            continue

        interface.fields.append((field.name, map_field_type(field, name_table)))

        if FieldType(field.type) == FieldType.RELATION:
            expand_type = resolve_relation_type(field, name_table)
            if expand_type is not None:
                relation_fields.append((field.name, expand_type))

    if relation_fields:
        interface.expand = EmittedExpandInterface(
            name=f"{interface.name}Expand",
            fields=relation_fields,
        )
    return interface


def build_interfaces(collections: Iterable[CollectionDescriptor]) -> List[EmittedInterface]:
    """
    Build interfaces for every non-view collection, in input order.

    Collections without a field list are skipped with a warning.
    """
    live = [c for c in collections if not c.is_view]
    name_table = build_name_table(live)

    interfaces = []
    for collection in live:
        extra = {"stage": TypegenStage.GENERATE.value, "collection": collection.name}
        if collection.fields is None:
            log.warning('Skipping collection "%s" - no fields found', collection.name, extra=extra)
            continue
        log.debug("Processing collection", extra=extra)
        interfaces.append(build_interface(collection, name_table))
    return interfaces


def generate_types(
    collections: Iterable[CollectionDescriptor],
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Generate the full TypeScript declarations file.

    Args:
        collections: Collection descriptors in server order
        generated_at: Timestamp for the banner (defaults to now)

    Returns:
        File contents
    """
    return render_types(build_interfaces(collections), generated_at)
