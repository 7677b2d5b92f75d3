"""Output blueprints. Importing this package registers every built-in blueprint."""

from svgmint.blueprints.base import Blueprint, available_blueprints, blueprint, get_blueprint
from svgmint.blueprints import angular, typescript  # noqa: F401

__all__ = ["Blueprint", "available_blueprints", "blueprint", "get_blueprint"]
