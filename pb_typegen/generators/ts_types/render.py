"""Rendering functions for TypeScript declarations."""
from datetime import datetime, timezone
from typing import List, Optional

from pb_typegen.generators.ts_types.types import EmittedExpandInterface, EmittedInterface

TOOL_NAME = "pocketbase-typegen"
BASE_FIELDS = ("id", "created", "updated")


def format_timestamp(moment: datetime) -> str:
    """Format as ISO-8601 UTC with milliseconds, e.g. 2024-01-01T00:00:00.000Z."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_banner(generated_at: Optional[datetime] = None) -> str:
    moment = generated_at or datetime.now(timezone.utc)
    lines = [
        f"// Auto-generated by {TOOL_NAME}",
        f"// Generated on {format_timestamp(moment)}",
        "",
        "",
    ]
    return "\n".join(lines)


def render_base_interface() -> str:
    lines = ["export interface Base {"]
    for name in BASE_FIELDS:
        lines.append(f"  {name}: string;")
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def render_interface(interface: EmittedInterface) -> str:
    """Render one collection interface extending Base."""
    lines = [f"export interface {interface.name} extends Base {{"]
    for field_name, field_type in interface.fields:
        lines.append(f"  {field_name}: {field_type};")
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def render_expand_interface(expand: EmittedExpandInterface) -> str:
    """Render the expand shape; every relation member is optional."""
    lines = [f"export interface {expand.name} {{"]
    for field_name, field_type in expand.fields:
        lines.append(f"  {field_name}?: {field_type};")
    lines.append("}")
    return "\n".join(lines) + "\n\n"


def render_types(interfaces: List[EmittedInterface], generated_at: Optional[datetime] = None) -> str:
    parts = [render_banner(generated_at), render_base_interface()]
    for interface in interfaces:
        parts.append(render_interface(interface))
        if interface.expand is not None:
            parts.append(render_expand_interface(interface.expand))
    return "".join(parts)
