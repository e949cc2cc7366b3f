"""Rendering of a single method parameter."""

from automatic_interface.models import LiteralValue, Parameter

STRING_ESCAPES = str.maketrans(
    {
        "\\": "\\\\",
        '"': '\\"',
        "\n": "\\n",
        "\r": "\\r",
        "\t": "\\t",
        "\0": "\\0",
    }
)


def render_parameter(param: Parameter) -> str:
    """Render ``<type> <name>`` with its default value suffix, if any."""
    signature = f"{param.type.display} {param.name}"
    if not param.has_explicit_default:
        return signature
    return f"{signature} = {_default_expression(param)}"


def _default_expression(param: Parameter) -> str:
    value = param.default_value
    if isinstance(value, LiteralValue):
        return value.text
    if isinstance(value, str):
        return f'"{value.translate(STRING_ESCAPES)}"'
    if value is None:
        if param.type.is_value_type:
            return f"default({param.type.display})"
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
