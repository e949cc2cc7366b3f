"""Orchestration logic for generating interface files from descriptor YAML."""

import argparse
import logging
import sys
from pathlib import Path

from automatic_interface.descriptor_error import DescriptorError
from automatic_interface.generate import generate
from automatic_interface.load_config import load_config
from automatic_interface.load_descriptor import load_descriptor
from automatic_interface.models import TypeDescriptor
from automatic_interface.output_file_for_interface import output_file_for_interface

logger = logging.getLogger(__name__)

DESCRIPTOR_PATTERNS = ("*.yml", "*.yaml")


def run_generation(args: argparse.Namespace) -> int:
    """Execute the generation pipeline over every descriptor file."""
    files = collect_descriptor_files(args.paths)
    if not files:
        msg = "No descriptor files found under: " + ", ".join(map(str, args.paths))
        raise SystemExit(msg)

    config = load_config(args.config)
    descriptors = _load_all(files)
    suffix = config["output"]["file_suffix"]

    written = 0
    skipped = 0
    for descriptor in descriptors:
        text = generate(descriptor, config)
        if not text:
            skipped += 1
            logger.info(
                "Skipped %s (%s is not a class)", descriptor.full_name, descriptor.kind
            )
            continue
        if args.dry_run:
            print(f"Would generate interface for {descriptor.full_name}")
            continue
        if args.out_dir is None:
            sys.stdout.write(text)
            continue
        out_file = output_file_for_interface(args.out_dir, descriptor, suffix)
        out_file.write_text(text, encoding="utf-8")
        logger.info("Wrote %s", out_file)
        written += 1

    if args.out_dir is not None and not args.dry_run:
        print(
            f"Generated {written} interfaces into: {args.out_dir} "
            f"({skipped} skipped)"
        )
    return 0


def collect_descriptor_files(paths: list[Path]) -> list[Path]:
    """Expand directories into their descriptor files, in a stable order."""
    files: list[Path] = []
    for p in paths:
        if p.is_dir():
            found = {f for pattern in DESCRIPTOR_PATTERNS for f in p.rglob(pattern)}
            files.extend(sorted(found))
        elif p.exists():
            files.append(p)
        else:
            logger.warning("Descriptor path does not exist: %s", p)
    return files


def _load_all(files: list[Path]) -> list[TypeDescriptor]:
    descriptors: list[TypeDescriptor] = []
    for f in files:
        try:
            descriptors.extend(load_descriptor(f))
        except DescriptorError as e:
            raise SystemExit(str(e)) from e
    return descriptors
