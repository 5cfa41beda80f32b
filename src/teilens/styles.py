"""Presentation style per annotation type.

The table must name every AnnotationType; a missing entry fails at import
instead of quietly falling back to the ``unknown`` style.
"""
from __future__ import annotations
from typing import Dict, FrozenSet, Tuple

from pydantic import BaseModel, ConfigDict

from .models import AnnotationType


class AnnotationStyle(BaseModel):
    model_config = ConfigDict(frozen=True)

    border_color: str
    background_color: str
    border_width: float
    opacity: float


def _style(color: str, rgb: Tuple[int, int, int], alpha: float = 0.15,
           border_width: float = 2, opacity: float = 0.8) -> AnnotationStyle:
    r, g, b = rgb
    return AnnotationStyle(border_color=color, background_color=f"rgba({r}, {g}, {b}, {alpha})",
                           border_width=border_width, opacity=opacity)


ANNOTATION_STYLES: Dict[AnnotationType, AnnotationStyle] = {
    AnnotationType.TITLE: _style("#e53935", (229, 57, 53)),
    AnnotationType.AUTHOR: _style("#43a047", (67, 160, 71)),
    AnnotationType.ABSTRACT: _style("#1e88e5", (30, 136, 229)),
    AnnotationType.SECTION: _style("#fb8c00", (251, 140, 0)),
    AnnotationType.REFERENCE: _style("#8e24aa", (142, 36, 170)),
    AnnotationType.FIGURE: _style("#00acc1", (0, 172, 193)),
    AnnotationType.TABLE: _style("#f4511e", (244, 81, 30)),
    AnnotationType.KEYWORD: _style("#7cb342", (124, 179, 66), border_width=1, opacity=0.7),
    AnnotationType.AFFILIATION: _style("#5e35b1", (94, 53, 177), border_width=1, opacity=0.7),
    AnnotationType.FORMULA: _style("#6d4c41", (109, 76, 65)),
    AnnotationType.PARAGRAPH: _style("#757575", (117, 117, 117), alpha=0.1, border_width=1, opacity=0.6),
    AnnotationType.UNKNOWN: _style("#9e9e9e", (158, 158, 158), alpha=0.1, border_width=1, opacity=0.5),
}


def check_total(table: Dict[AnnotationType, object], name: str) -> None:
    missing = [t.value for t in AnnotationType if t not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


check_total(ANNOTATION_STYLES, "ANNOTATION_STYLES")

# Types shown when a viewer opens a document.
DEFAULT_VISIBLE_TYPES: FrozenSet[AnnotationType] = frozenset({
    AnnotationType.TITLE, AnnotationType.AUTHOR, AnnotationType.ABSTRACT, AnnotationType.SECTION,
    AnnotationType.REFERENCE, AnnotationType.FIGURE, AnnotationType.TABLE,
})

# Types the TEI extractor can produce, in legend order.
LEGEND_TYPES: Tuple[AnnotationType, ...] = (
    AnnotationType.TITLE, AnnotationType.AUTHOR, AnnotationType.ABSTRACT, AnnotationType.SECTION,
    AnnotationType.REFERENCE, AnnotationType.FIGURE, AnnotationType.TABLE, AnnotationType.KEYWORD,
    AnnotationType.AFFILIATION, AnnotationType.FORMULA,
)


def style_for(kind: AnnotationType) -> AnnotationStyle:
    return ANNOTATION_STYLES[kind]
