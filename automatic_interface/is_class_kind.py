"""Predicate for checking if a descriptor is class-shaped."""


def is_class_kind(kind: str) -> bool:
    """Check if the kind represents a class declaration."""
    return kind.strip().lower() == "class"
