"""svgmint: compile a directory of SVG files into typed source modules."""

__version__ = "0.1.0"
