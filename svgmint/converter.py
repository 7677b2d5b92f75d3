"""Batch driver: walk the input directory, run each SVG through the pipeline, render."""

from __future__ import annotations

import logging
import os

from svgmint.blueprints import get_blueprint
from svgmint.blueprints.manifest import write_manifest
from svgmint.config import Settings
from svgmint.engine.config import PipelineConfig
from svgmint.engine.hashing import HashAllocator
from svgmint.engine.loader import load_source_file
from svgmint.engine.pipeline import create_pipeline
from svgmint.errors import InputDirectoryMissingError
from svgmint.models.record import OutputRecord
from svgmint.svg.validation import is_svg_path
from svgmint.utils.fs import walk_files

logger = logging.getLogger(__name__)


def convert(settings: Settings, allocator: HashAllocator | None = None) -> list[OutputRecord]:
    """Convert every SVG below ``settings.input`` and return the accepted records.

    Per-file problems are logged and the file is left out of every output. A
    missing input directory or an unknown blueprint stops the run before anything
    is written.
    """
    if not os.path.isdir(settings.input):
        raise InputDirectoryMissingError(settings.input)

    renderer = get_blueprint(settings.blueprint)(settings)
    config = PipelineConfig.from_settings(settings)
    pipeline = create_pipeline(config)
    if allocator is None:
        allocator = HashAllocator(config.hash_length)

    logger.info("Converting svg files from %s with the %s blueprint", settings.input, renderer.name)

    records: list[OutputRecord] = []
    for path in walk_files(settings.input):
        if not is_svg_path(path):
            continue
        try:
            source = load_source_file(path, allocator)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unable to read %s: %s", path, e)
            continue

        record = pipeline.process(source)
        if record is None:
            continue
        renderer.save_file(record)
        records.append(record)

    renderer.generate_index_file(records)
    if settings.manifest:
        path = write_manifest(settings, records)
        logger.info("Manifest written to %s", path)

    logger.info("Processed %d svg's into: %s", len(records), settings.output)
    return records
