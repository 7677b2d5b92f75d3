"""Blueprint contract and registry.

A blueprint turns OutputRecords into source files of one target shape. Register
one with the class decorator and select it by name at run time:

    @blueprint("typescript")
    class TypeScriptBlueprint(Blueprint):
        ...
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from svgmint.errors import UnknownBlueprintError
from svgmint.models.record import OutputRecord
from svgmint.utils.fs import write_text

if TYPE_CHECKING:
    from svgmint.config import Settings

logger = logging.getLogger(__name__)

_BLUEPRINTS: dict[str, type["Blueprint"]] = {}


class Blueprint:
    """Renders records and persists them under ``settings.output``."""

    name = ""

    def __init__(self, settings: "Settings") -> None:
        self.settings = settings

    @property
    def output(self) -> str:
        return self.settings.output

    def render(self, record: OutputRecord) -> str:
        raise NotImplementedError

    def save_file(self, record: OutputRecord) -> list[str]:
        """Persist one record; returns the written paths."""
        raise NotImplementedError

    def generate_index_file(self, records: list[OutputRecord]) -> list[str]:
        """Persist the aggregate barrel for every saved record; returns the written paths."""
        raise NotImplementedError

    def write(self, path: str, content: str) -> str:
        write_text(path, content)
        return path

    def join(self, *parts: str) -> str:
        return os.path.join(self.output, *parts)


def blueprint(name: str):
    """Class decorator registering a Blueprint under ``name``."""

    def decorator(cls: type[Blueprint]) -> type[Blueprint]:
        if name in _BLUEPRINTS:
            raise ValueError(f"Duplicate blueprint: {name}")
        cls.name = name
        _BLUEPRINTS[name] = cls
        logger.debug("Registered blueprint %s", name)
        return cls

    return decorator


def available_blueprints() -> list[str]:
    return sorted(_BLUEPRINTS)


def get_blueprint(name: str) -> type[Blueprint]:
    try:
        return _BLUEPRINTS[name]
    except KeyError:
        raise UnknownBlueprintError(name, available_blueprints()) from None
