from __future__ import annotations
from typing import Iterator

from .coords import CoordinateRun
from .models import Annotation, AnnotationType, BoundingBox

ID_PREFIX = "annotation-"


class IdSequence:
    """Annotation ids for one parse call: annotation-0, annotation-1, ...

    One instance is created per parse and passed through every category,
    so numbering follows the traversal order of the whole document.
    """

    def __init__(self, start: int = 0):
        self._next = start

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        value = f"{ID_PREFIX}{self._next}"
        self._next += 1
        return value

    @property
    def issued(self) -> int:
        return self._next


def build_annotation(annotation_id: str, kind: AnnotationType, run: CoordinateRun, text: str) -> Annotation:
    return Annotation(
        id=annotation_id,
        type=kind,
        page=run.page,
        bbox=BoundingBox(x=run.x, y=run.y, width=run.w, height=run.h),
        text=(text or "").strip(),
    )
