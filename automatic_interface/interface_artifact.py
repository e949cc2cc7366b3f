"""The assembled, immutable description of a generated interface."""

from collections.abc import Iterable
from dataclasses import dataclass

from automatic_interface.class_documentation import class_documentation
from automatic_interface.extract_members import ExtractedMembers
from automatic_interface.generic_clause import generic_clause
from automatic_interface.models import TypeDescriptor
from automatic_interface.render_member import (
    method_uses_nullable,
    render_event,
    render_method,
    render_property,
)

INTERFACE_PREFIX = "I"


@dataclass(frozen=True)
class InterfaceArtifact:
    """Everything needed to write one interface source file."""

    namespace: str
    interface_name: str
    generic_clause: str = ""
    imports: tuple[str, ...] = ()
    documentation: str = ""
    properties: tuple[str, ...] = ()
    methods: tuple[str, ...] = ()
    events: tuple[str, ...] = ()
    requires_nullable_context: bool = False

    @property
    def member_count(self) -> int:
        """Return the number of rendered member declarations."""
        return len(self.properties) + len(self.methods) + len(self.events)


def interface_name_for(class_name: str) -> str:
    """Return the interface name for a class: ``Widget`` -> ``IWidget``."""
    return f"{INTERFACE_PREFIX}{class_name}"


def build_interface_artifact(
    descriptor: TypeDescriptor,
    members: ExtractedMembers,
) -> InterfaceArtifact:
    """Assemble the artifact once from a descriptor and its classified members."""
    nullable = (
        any(p.type.annotated for p in members.properties)
        or any(method_uses_nullable(m) for m in members.methods)
        or any(e.type.annotated for e in members.events)
    )
    return InterfaceArtifact(
        namespace=descriptor.namespace,
        interface_name=interface_name_for(descriptor.name),
        generic_clause=generic_clause(descriptor.type_parameters),
        imports=_flatten_imports(descriptor.imports),
        documentation=class_documentation(descriptor.documentation),
        properties=tuple(render_property(p) for p in members.properties),
        methods=tuple(render_method(m) for m in members.methods),
        events=tuple(render_event(e) for e in members.events),
        requires_nullable_context=nullable,
    )


def _flatten_imports(imports: Iterable[str]) -> tuple[str, ...]:
    # Repeated directives across scopes are kept; only blanks are dropped.
    return tuple(i.strip() for i in imports if i and i.strip())
