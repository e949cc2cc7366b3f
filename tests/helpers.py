"""Shared builders for test descriptors."""

from typing import Any

from automatic_interface.models import (
    EventMember,
    MethodMember,
    Parameter,
    PropertyMember,
    TypeRef,
)

STRING = TypeRef("string")
INT = TypeRef("int", is_value_type=True)
VOID = TypeRef("void")


def prop(name: str, type_: TypeRef = STRING, **kwargs: Any) -> PropertyMember:
    """Build a public read/write property."""
    return PropertyMember(name=name, type=type_, **kwargs)


def method(
    name: str, *params: Parameter, returns: TypeRef = VOID, **kwargs: Any
) -> MethodMember:
    """Build a public ordinary method."""
    return MethodMember(name=name, return_type=returns, parameters=params, **kwargs)


def event(name: str, **kwargs: Any) -> EventMember:
    """Build a public event of type EventHandler."""
    return EventMember(name=name, type=TypeRef("System.EventHandler"), **kwargs)
