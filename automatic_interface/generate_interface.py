"""Generate C# interfaces mirroring the public instance API of classes.

Reads resolved type descriptors (YAML) and writes one interface source file per
class.
"""

import argparse
import logging
from pathlib import Path

from automatic_interface.run_generation import run_generation


def main() -> int:
    """Run the generation process."""
    ap = argparse.ArgumentParser(
        description="Generate C# interfaces from resolved class descriptors.",
    )
    ap.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Descriptor *.yml files or directories containing them",
    )
    ap.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Directory for generated files (default: write to stdout)",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be generated without writing anything",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    args = ap.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return run_generation(args)


if __name__ == "__main__":
    raise SystemExit(main())
