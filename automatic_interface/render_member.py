"""Rendering of interface member declarations."""

from automatic_interface.generic_clause import type_parameter_list, where_clauses
from automatic_interface.models import EventMember, MethodMember, PropertyMember
from automatic_interface.render_parameter import render_parameter


def render_property(prop: PropertyMember) -> str:
    """Render a property with exactly its public accessors."""
    accessors = []
    if prop.has_public_getter:
        accessors.append("get;")
    if prop.has_public_setter:
        accessors.append("set;")
    return f"{prop.type.display} {prop.name} {{ {' '.join(accessors)} }}"


def render_method(method: MethodMember) -> str:
    """Render a method signature, generics and constraints included."""
    params = ", ".join(render_parameter(p) for p in method.parameters)
    generics = type_parameter_list(method.type_parameters)
    signature = f"{method.return_type.display} {method.name}{generics}({params})"
    constraints = where_clauses(method.type_parameters)
    if constraints:
        signature = f"{signature} {constraints}"
    return f"{signature};"


def render_event(evt: EventMember) -> str:
    """Render an event declaration."""
    return f"event {evt.type.display} {evt.name};"


def method_uses_nullable(method: MethodMember) -> bool:
    """Check whether the return type or any parameter is nullable-annotated."""
    return method.return_type.annotated or any(p.nullable for p in method.parameters)
