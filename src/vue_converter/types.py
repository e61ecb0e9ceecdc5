"""Shared type aliases and lookup tables for converter modules."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal, TypeAlias

MessageKind: TypeAlias = Literal["success", "warning", "error"]
HookName: TypeAlias = Literal[
    "mounted",
    "created",
    "beforeMount",
    "beforeUpdate",
    "updated",
    "beforeDestroy",
    "destroyed",
]

FALLBACK_TS_TYPE = "any"

PROP_TYPE_MAP: Mapping[str, str] = MappingProxyType(
    {
        "String": "string",
        "Number": "number",
        "Boolean": "boolean",
        "Array": "Array<any>",
        "Object": "Record<string, any>",
        "Function": "(...args: any[]) => any",
    }
)

# Insertion order is the emission order of lifecycle registrations.
LIFECYCLE_HOOKS: Mapping[HookName, str] = MappingProxyType(
    {
        "mounted": "onMounted",
        "created": "onCreated",
        "beforeMount": "onBeforeMount",
        "beforeUpdate": "onBeforeUpdate",
        "updated": "onUpdated",
        "beforeDestroy": "onBeforeUnmount",
        "destroyed": "onUnmounted",
    }
)


def map_prop_type(type_name: str) -> str:
    """Map a Vue prop constructor name to a TypeScript annotation."""
    return PROP_TYPE_MAP.get(type_name.strip(), FALLBACK_TS_TYPE)
