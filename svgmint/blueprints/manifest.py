"""Aggregate JSON manifest of one run, readable by other build tooling."""

from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from svgmint.models.record import OutputRecord
from svgmint.utils.fs import write_text

if TYPE_CHECKING:
    from svgmint.config import Settings


def manifest_path(settings: "Settings") -> str:
    return os.path.join(settings.output, f"{settings.module}.svgmint.json")


def build_manifest(module: str, records: list[OutputRecord]) -> dict:
    return {
        "module": module,
        "exports": [record.name for record in records],
        "files": [record.to_dict(exclude={"path"}) for record in records],
    }


def write_manifest(settings: "Settings", records: list[OutputRecord]) -> str:
    path = manifest_path(settings)
    write_text(path, json.dumps(build_manifest(settings.module, records), indent=2) + "\n")
    return path
