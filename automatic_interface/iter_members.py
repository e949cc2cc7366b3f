"""Walk the members of a class and its non-root ancestors."""

from collections.abc import Iterable, Iterator

from automatic_interface.is_root_object_type import is_root_object_type
from automatic_interface.models import Member, TypeDescriptor


def iter_members(
    descriptor: TypeDescriptor,
    root_types: Iterable[str],
) -> Iterator[tuple[str, Member]]:
    """Yield ``(declaring_type, member)`` pairs, most derived type first.

    The walk stops at the first ancestor that is a root object type.
    """
    roots = tuple(root_types)
    current: TypeDescriptor | None = descriptor
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        if current is not descriptor and is_root_object_type(current.full_name, roots):
            break
        seen.add(id(current))
        for member in current.members:
            yield current.full_name, member
        current = current.base
