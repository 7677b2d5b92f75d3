"""Source loading: read one SVG from disk and give it a run-unique hash."""

from __future__ import annotations

import logging
import os
import re

from svgmint.engine.context import SourceFile
from svgmint.engine.hashing import HashAllocator
from svgmint.utils.strings import safe_name

logger = logging.getLogger(__name__)

_LINE_BREAKS_RE = re.compile(r"\r?\n|\r")


def load_source_file(path: str, allocator: HashAllocator) -> SourceFile:
    with open(path, encoding="utf-8") as f:
        svg = _LINE_BREAKS_RE.sub("", f.read())
    stem = os.path.splitext(os.path.basename(path))[0]
    source = SourceFile(path=path, name=safe_name(stem), svg=svg, hash=allocator.allocate())
    logger.debug("Loaded %s as %s (%s)", path, source.name, source.hash)
    return source
