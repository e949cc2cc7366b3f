"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from automatic_interface.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "root_object_types": ["object", "Object", "System.Object"],
    "inherit_doc_marker": "/// <inheritdoc />",
    "rendering": {
        "indent": "    ",
        "auto_generated_header": True,
        "generated_code_attribute": True,
        "nullable_directive": True,
        "tool_name": "AutomaticInterface",
        "tool_version": "",
    },
    "output": {
        "file_suffix": ".g.cs",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file not found: %s. Using defaults.", path)
    return config
