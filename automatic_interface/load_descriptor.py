"""Logic for loading type descriptors from YAML files.

A descriptor file holds one type mapping, a list of them, or a mapping with a
``types`` list. Example::

    namespace: Demo
    name: Box
    type_parameters: [{name: T, constraint: notnull}]
    documentation: ["/// <summary>A box.</summary>"]
    imports: ["using System;"]
    members:
      - {kind: property, name: Value, type: T}
      - kind: method
        name: Fill
        returns: void
        parameters: [{name: count, type: int, default: null}]
    base: {namespace: Demo, name: BoxBase, members: []}

Types are a string (``string?`` marks a nullable annotation) or a mapping with
``name``, ``nullable`` and ``value_type`` keys.
"""

from pathlib import Path
from typing import Any

import yaml

from automatic_interface.descriptor_error import DescriptorError
from automatic_interface.models import (
    ORDINARY,
    PUBLIC,
    EventMember,
    LiteralValue,
    Member,
    MethodMember,
    Parameter,
    PropertyMember,
    TypeDescriptor,
    TypeParameter,
    TypeRef,
)

VALUE_TYPE_KEYWORDS = frozenset(
    {
        "bool",
        "byte",
        "sbyte",
        "char",
        "decimal",
        "double",
        "float",
        "int",
        "uint",
        "nint",
        "nuint",
        "long",
        "ulong",
        "short",
        "ushort",
        "System.DateTime",
        "System.TimeSpan",
        "System.Guid",
        "DateTime",
        "TimeSpan",
        "Guid",
    }
)


def load_descriptor(path: Path) -> list[TypeDescriptor]:
    """Load and parse every type descriptor in a YAML file."""
    try:
        doc = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        msg = f"{path}: invalid YAML: {e}"
        raise DescriptorError(msg) from e

    if doc is None:
        return []
    if isinstance(doc, dict) and "types" in doc:
        doc = doc["types"] or []
    entries = doc if isinstance(doc, list) else [doc]
    return [parse_type(entry, path) for entry in entries]


def parse_type(raw: Any, source: Path | str = "<memory>") -> TypeDescriptor:
    """Build a TypeDescriptor from a parsed YAML mapping."""
    if not isinstance(raw, dict):
        msg = f"{source}: type entry must be a mapping, got {type(raw).__name__}"
        raise DescriptorError(msg)
    name = _text(raw.get("name"), "name", source)
    if not name:
        msg = f"{source}: type entry without a name"
        raise DescriptorError(msg)

    where = f"{source}:{name}"
    base = raw.get("base")
    docs = raw.get("documentation") or []
    if isinstance(docs, str):
        docs = [docs]
    return TypeDescriptor(
        namespace=_text(raw.get("namespace"), "namespace", where),
        name=name,
        kind=_text(raw.get("kind"), "kind", where) or "class",
        type_parameters=_parse_type_parameters(raw.get("type_parameters"), where),
        documentation=tuple(_raw_text(d, "documentation", where) for d in docs),
        imports=tuple(_text(i, "imports", where) for i in raw.get("imports") or []),
        members=tuple(_parse_member(m, where) for m in raw.get("members") or []),
        base=parse_type(base, source) if base else None,
    )


def parse_type_ref(raw: Any, source: str = "<memory>") -> TypeRef:
    """Build a TypeRef from a string or mapping form."""
    if isinstance(raw, dict):
        name = _text(raw.get("name"), "type.name", source)
        nullable = _flag(raw, "nullable", False, source)
        value_type = raw.get("value_type")
        if value_type is not None:
            value_type = _flag(raw, "value_type", False, source)
    else:
        name = _text(raw, "type", source)
        nullable = False
        value_type = None
    if not name:
        msg = f"{source}: missing type"
        raise DescriptorError(msg)
    if name.endswith("?"):
        name = name[:-1]
        nullable = True
    if value_type is None:
        value_type = name in VALUE_TYPE_KEYWORDS
    return TypeRef(name=name, nullable=nullable, is_value_type=value_type)


def _text(value: Any, field: str, source: Path | str) -> str:
    """Return a stripped scalar; lists and mappings are rejected."""
    if value is None:
        return ""
    if isinstance(value, (dict, list)):
        msg = f"{source}: {field} must be a scalar, got {type(value).__name__}"
        raise DescriptorError(msg)
    return str(value).strip()


def _raw_text(value: Any, field: str, source: str) -> str:
    if not isinstance(value, str):
        msg = f"{source}: {field} entries must be strings"
        raise DescriptorError(msg)
    return value


def _flag(raw: dict[str, Any], key: str, default: bool, source: str) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        msg = f"{source}: {key} must be true or false, got {value!r}"
        raise DescriptorError(msg)
    return value


def _parse_type_parameters(raw: Any, source: str) -> tuple[TypeParameter, ...]:
    params = []
    for p in raw or []:
        if isinstance(p, dict):
            name = _text(p.get("name"), "type_parameters.name", source)
            constraint = _text(p.get("constraint"), "constraint", source) or None
            params.append(TypeParameter(name, constraint))
        else:
            params.append(TypeParameter(_text(p, "type_parameters", source)))
    return tuple(params)


def _parse_member(raw: Any, source: str) -> Member:
    if not isinstance(raw, dict) or not raw.get("name"):
        msg = f"{source}: member entry must be a mapping with a name"
        raise DescriptorError(msg)

    name = _text(raw["name"], "member name", source)
    where = f"{source}.{name}"
    kind = _text(raw.get("kind"), "kind", where).lower()
    accessibility = _text(raw.get("accessibility"), "accessibility", where) or PUBLIC
    is_static = _flag(raw, "static", False, where)

    if kind == "property":
        return PropertyMember(
            name=name,
            type=parse_type_ref(raw.get("type"), where),
            has_public_getter=_flag(raw, "get", True, where),
            has_public_setter=_flag(raw, "set", True, where),
            is_indexer=_flag(raw, "indexer", False, where),
            is_static=is_static,
            accessibility=accessibility,
        )
    if kind == "method":
        method_kind = _text(raw.get("method_kind"), "method_kind", where)
        return MethodMember(
            name=name,
            return_type=parse_type_ref(raw.get("returns") or "void", where),
            parameters=tuple(
                _parse_parameter(p, where) for p in raw.get("parameters") or []
            ),
            type_parameters=_parse_type_parameters(raw.get("type_parameters"), where),
            is_static=is_static,
            accessibility=accessibility,
            method_kind=method_kind or ORDINARY,
            overridden_type=_text(raw.get("overrides"), "overrides", where) or None,
        )
    if kind == "event":
        return EventMember(
            name=name,
            type=parse_type_ref(raw.get("type"), where),
            is_static=is_static,
            accessibility=accessibility,
        )
    msg = f"{source}: member {name!r} has unknown kind {kind!r}"
    raise DescriptorError(msg)


def _parse_parameter(raw: Any, source: str) -> Parameter:
    if not isinstance(raw, dict):
        msg = f"{source}: parameter entry must be a mapping"
        raise DescriptorError(msg)
    name = _text(raw.get("name"), "parameter name", source)
    where = f"{source}({name})"
    has_default = "default" in raw
    default = raw.get("default")
    if isinstance(default, dict) and "literal" in default:
        default = LiteralValue(_text(default["literal"], "literal", where))
    elif isinstance(default, (dict, list)):
        msg = f"{where}: default must be a scalar or {{literal: ...}}"
        raise DescriptorError(msg)
    return Parameter(
        name=name,
        type=parse_type_ref(raw.get("type"), where),
        has_explicit_default=has_default,
        default_value=default,
    )
