"""
GROBID ``coords`` attribute decoding.

  coords="1,60.94,248.09,473.40,9.21;2,60.94,259.59,376.69,9.21"
  → [CoordinateRun(page=1, x=60.94, ...), CoordinateRun(page=2, ...)]

Each ``;``-separated run is decoded on its own: a broken run is dropped and
its siblings are kept. Numbers after ``h`` (font size in some GROBID builds)
are ignored.
"""
from __future__ import annotations
import logging
import math
import re
from typing import List, NamedTuple, Optional

logger = logging.getLogger(__name__)

NUMBER_RE = re.compile(r"^[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?$")
MIN_FIELDS = 5


class CoordinateRun(NamedTuple):
    page: int
    x: float
    y: float
    w: float
    h: float


def _parse_number(field: str) -> Optional[float]:
    field = field.strip()
    if not NUMBER_RE.match(field):
        return None
    value = float(field)
    return value if math.isfinite(value) else None


def decode_run(chunk: str) -> Optional[CoordinateRun]:
    """Decode one ``page,x,y,w,h`` run, or return None if it is not valid."""
    values = [_parse_number(f) for f in chunk.split(",")]
    if len(values) < MIN_FIELDS or any(v is None for v in values):
        return None
    page, x, y, w, h = values[:MIN_FIELDS]
    return CoordinateRun(math.floor(page), x, y, w, h)


def decode_coords(coords: Optional[str]) -> List[CoordinateRun]:
    if not coords:
        return []
    runs = []
    for chunk in coords.split(";"):
        run = decode_run(chunk)
        if run is None:
            logger.debug("dropping malformed coordinate run %r", chunk)
            continue
        runs.append(run)
    return runs
