"""Entry point of the class-to-interface transform."""

import logging
from typing import Any

from automatic_interface.extract_members import extract_members
from automatic_interface.interface_artifact import build_interface_artifact
from automatic_interface.is_class_kind import is_class_kind
from automatic_interface.load_config import DEFAULT_CONFIG
from automatic_interface.models import TypeDescriptor
from automatic_interface.render_interface import render_interface

logger = logging.getLogger(__name__)


def generate(descriptor: TypeDescriptor, config: dict[str, Any] | None = None) -> str:
    """Generate the interface source text for a class descriptor.

    Descriptors that are not class-shaped yield an empty string.
    """
    cfg = config or DEFAULT_CONFIG
    if not is_class_kind(descriptor.kind):
        logger.debug(
            "Skipping %s: %s is not a class", descriptor.full_name, descriptor.kind
        )
        return ""

    root_types = cfg.get("root_object_types", DEFAULT_CONFIG["root_object_types"])
    members = extract_members(descriptor, root_types)
    artifact = build_interface_artifact(descriptor, members)
    logger.debug(
        "Built %s: %d properties, %d methods, %d events",
        artifact.interface_name,
        len(artifact.properties),
        len(artifact.methods),
        len(artifact.events),
    )
    return render_interface(artifact, cfg)
