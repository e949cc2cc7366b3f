"""Logic for deep merging configuration dictionaries."""

from typing import Any


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for specific keys.
    - 'root_object_types' is additive.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key == "root_object_types"
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Additive, first occurrence keeps its position
            merged = list(result[key])
            merged.extend(v for v in value if v not in merged)
            result[key] = merged
        else:
            result[key] = value
    return result
