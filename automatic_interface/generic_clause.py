"""Rendering of generic parameter lists and constraint clauses."""

from collections.abc import Sequence

from automatic_interface.models import TypeParameter


def type_parameter_list(params: Sequence[TypeParameter]) -> str:
    """Render ``<T, U>``, or an empty string when there are no parameters."""
    if not params:
        return ""
    return "<" + ", ".join(p.name for p in params) + ">"


def where_clauses(params: Sequence[TypeParameter]) -> str:
    """Render the constraint clauses in declaration order."""
    return " ".join(
        f"where {p.name} : {p.constraint.strip()}"
        for p in params
        if p.constraint and p.constraint.strip()
    )


def generic_clause(params: Sequence[TypeParameter]) -> str:
    """Render the full generic clause of a type declaration."""
    if not params:
        return ""
    return f"{type_parameter_list(params)} {where_clauses(params)}".strip()
