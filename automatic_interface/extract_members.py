"""Classify the public instance members of a class for interface exposure."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from automatic_interface.is_root_object_type import is_root_object_type
from automatic_interface.iter_members import iter_members
from automatic_interface.models import (
    ORDINARY,
    PUBLIC,
    EventMember,
    MethodMember,
    PropertyMember,
    TypeDescriptor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractedMembers:
    """Members eligible for the interface, grouped by kind in discovery order."""

    properties: tuple[PropertyMember, ...] = ()
    methods: tuple[MethodMember, ...] = ()
    events: tuple[EventMember, ...] = ()


def extract_members(
    descriptor: TypeDescriptor,
    root_types: Iterable[str],
) -> ExtractedMembers:
    """Apply the exposure filters over the class and its ancestors."""
    roots = tuple(root_types)
    properties: dict[str, PropertyMember] = {}
    methods: dict[tuple[object, ...], MethodMember] = {}
    events: dict[str, EventMember] = {}

    for declaring_type, member in iter_members(descriptor, roots):
        if isinstance(member, PropertyMember):
            if _is_exposed_property(member) and member.name not in properties:
                properties[member.name] = member
        elif isinstance(member, MethodMember):
            if _is_exposed_method(member, declaring_type, roots):
                methods.setdefault(_method_identity(member), member)
        elif isinstance(member, EventMember):
            if _is_exposed_event(member):
                events.setdefault(member.name, member)

    return ExtractedMembers(
        properties=tuple(properties.values()),
        methods=tuple(methods.values()),
        events=tuple(events.values()),
    )


def _is_exposed_property(prop: PropertyMember) -> bool:
    if prop.accessibility != PUBLIC or prop.is_static or prop.is_indexer:
        return False
    if not (prop.has_public_getter or prop.has_public_setter):
        logger.debug("Skipping property %s: no public accessor", prop.name)
        return False
    return True


def _is_exposed_method(
    method: MethodMember,
    declaring_type: str,
    roots: tuple[str, ...],
) -> bool:
    return (
        method.accessibility == PUBLIC
        and not method.is_static
        and method.method_kind == ORDINARY
        and not is_root_object_type(declaring_type, roots)
        and not is_root_object_type(method.overridden_type, roots)
    )


def _is_exposed_event(evt: EventMember) -> bool:
    return evt.accessibility == PUBLIC and not evt.is_static


def _method_identity(method: MethodMember) -> tuple[object, ...]:
    """Overrides and hidden members share this key with their base declaration."""
    return (
        method.name,
        len(method.type_parameters),
        tuple(p.type.display for p in method.parameters),
    )
