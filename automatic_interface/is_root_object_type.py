"""Predicate for the universal base type every class derives from."""

from collections.abc import Iterable


def is_root_object_type(type_name: str | None, root_types: Iterable[str]) -> bool:
    """Check if a simple or qualified type name denotes the root object type."""
    if not type_name:
        return False
    roots = set(root_types)
    return type_name in roots or type_name.rsplit(".", 1)[-1] in roots
