"""Logic for determining the output file path for a generated interface."""

from pathlib import Path

from automatic_interface.interface_artifact import interface_name_for
from automatic_interface.models import TypeDescriptor


def output_file_for_interface(
    out_root: Path, descriptor: TypeDescriptor, suffix: str = ".g.cs"
) -> Path:
    """Return ``<out_root>/<Namespace>.I<Name><suffix>`` and ensure parents exist."""
    stem = interface_name_for(descriptor.name)
    if descriptor.namespace:
        stem = f"{descriptor.namespace}.{stem}"
    out_file = out_root / f"{stem}{suffix}"
    out_file.parent.mkdir(parents=True, exist_ok=True)
    return out_file
