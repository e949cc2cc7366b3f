"""Data models describing a resolved class and its members."""

from __future__ import annotations

from dataclasses import dataclass

PUBLIC = "public"
ORDINARY = "ordinary"


@dataclass(frozen=True)
class TypeRef:
    """A type as it appears in a signature."""

    name: str
    nullable: bool = False
    is_value_type: bool = False

    @property
    def display(self) -> str:
        """Return the type text including its nullable annotation."""
        if self.nullable and not self.name.endswith("?"):
            return f"{self.name}?"
        return self.name

    @property
    def annotated(self) -> bool:
        """Whether the type text carries a nullable annotation anywhere.

        Covers nested annotations such as ``List<string?>``.
        """
        return "?" in self.display


@dataclass(frozen=True)
class LiteralValue:
    """A default value expression emitted verbatim (e.g. ``Color.Red``)."""

    text: str


@dataclass(frozen=True)
class Parameter:
    """A method parameter."""

    name: str
    type: TypeRef
    has_explicit_default: bool = False
    default_value: object = None  # str, None, bool, number or LiteralValue

    @property
    def nullable(self) -> bool:
        """Whether the parameter type carries a nullable annotation."""
        return self.type.annotated


@dataclass(frozen=True)
class TypeParameter:
    """A generic type parameter with its optional constraint."""

    name: str
    constraint: str | None = None  # right-hand side, e.g. "notnull"


@dataclass(frozen=True)
class PropertyMember:
    """A property declared on a class."""

    name: str
    type: TypeRef
    has_public_getter: bool = True
    has_public_setter: bool = True
    is_indexer: bool = False
    is_static: bool = False
    accessibility: str = PUBLIC


@dataclass(frozen=True)
class MethodMember:
    """A method declared on a class."""

    name: str
    return_type: TypeRef
    parameters: tuple[Parameter, ...] = ()
    type_parameters: tuple[TypeParameter, ...] = ()
    is_static: bool = False
    accessibility: str = PUBLIC
    method_kind: str = ORDINARY  # ordinary/constructor/operator/accessor/...
    overridden_type: str | None = None  # type that introduced an overridden slot


@dataclass(frozen=True)
class EventMember:
    """An event declared on a class."""

    name: str
    type: TypeRef
    is_static: bool = False
    accessibility: str = PUBLIC


Member = PropertyMember | MethodMember | EventMember


@dataclass(frozen=True)
class TypeDescriptor:
    """A fully resolved class-like type handed to the generator."""

    namespace: str
    name: str
    kind: str = "class"
    type_parameters: tuple[TypeParameter, ...] = ()
    documentation: tuple[str, ...] = ()  # leading trivia blocks, source order
    imports: tuple[str, ...] = ()
    members: tuple[Member, ...] = ()
    base: TypeDescriptor | None = None

    @property
    def full_name(self) -> str:
        """Return the namespace-qualified name."""
        if self.namespace:
            return f"{self.namespace}.{self.name}"
        return self.name
