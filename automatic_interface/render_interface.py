"""Logic for serializing an interface artifact to C# source text."""

from typing import Any

from automatic_interface.interface_artifact import InterfaceArtifact
from automatic_interface.load_config import DEFAULT_CONFIG

AUTO_GENERATED_HEADER = """\
//--------------------------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by a source generator named {tool_name}.
//
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
//--------------------------------------------------------------------------------------------------"""


def render_interface(
    artifact: InterfaceArtifact,
    config: dict[str, Any] | None = None,
) -> str:
    """Render the interface source text in its fixed section order."""
    cfg = config or DEFAULT_CONFIG
    rendering = {**DEFAULT_CONFIG["rendering"], **cfg.get("rendering", {})}
    marker = cfg.get("inherit_doc_marker", DEFAULT_CONFIG["inherit_doc_marker"])
    indent = rendering["indent"]
    nullable = artifact.requires_nullable_context and rendering["nullable_directive"]

    parts: list[str] = []
    if rendering["auto_generated_header"]:
        parts += [AUTO_GENERATED_HEADER.format(tool_name=rendering["tool_name"]), ""]

    if artifact.imports:
        parts.extend(artifact.imports)
        parts.append("")

    if nullable:
        parts += ["#nullable enable", ""]

    body_indent = indent
    if artifact.namespace:
        parts += [f"namespace {artifact.namespace}", "{"]
    else:
        body_indent = ""
    member_indent = body_indent + indent

    if artifact.documentation:
        parts.extend(_indent_block(artifact.documentation, body_indent))
    if rendering["generated_code_attribute"]:
        parts.append(
            f"{body_indent}[global::System.CodeDom.Compiler.GeneratedCode("
            f'"{rendering["tool_name"]}", "{rendering["tool_version"]}")]'
        )

    declaration = (
        f"public partial interface {artifact.interface_name}{artifact.generic_clause}"
    )
    parts += [f"{body_indent}{declaration}", f"{body_indent}{{"]

    for member in (*artifact.properties, *artifact.methods, *artifact.events):
        parts.append(f"{member_indent}{marker}")
        parts.append(f"{member_indent}{member}")
        parts.append("")

    parts.append(f"{body_indent}}}")
    if artifact.namespace:
        parts.append("}")

    if nullable:
        parts += ["#nullable restore"]

    return "\n".join(parts) + "\n"


def _indent_block(text: str, indent: str) -> list[str]:
    return [
        f"{indent}{line.strip()}" if line.strip() else "" for line in text.splitlines()
    ]
