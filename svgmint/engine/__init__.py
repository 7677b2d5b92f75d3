"""svgmint per-file conversion engine."""

from svgmint.engine.context import FileContext, SourceFile
from svgmint.engine.pipeline import Pipeline, create_pipeline
from svgmint.engine.registry import Layer, get_registry, stage

__all__ = [
    "FileContext",
    "Layer",
    "Pipeline",
    "SourceFile",
    "create_pipeline",
    "get_registry",
    "stage",
]
