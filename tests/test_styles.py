import pytest

from teilens.models import AnnotationType
from teilens.styles import (
    ANNOTATION_STYLES, DEFAULT_VISIBLE_TYPES, LEGEND_TYPES, check_total, style_for,
)
from teilens.tei_extractor import CATEGORIES


def test_every_type_has_a_style() -> None:
    assert set(ANNOTATION_STYLES) == set(AnnotationType)
    assert style_for(AnnotationType.TITLE).border_color == "#e53935"
    assert style_for(AnnotationType.KEYWORD).border_width == 1


def test_missing_entry_is_rejected() -> None:
    partial = dict(ANNOTATION_STYLES)
    del partial[AnnotationType.FORMULA]
    with pytest.raises(RuntimeError, match="formula"):
        check_total(partial, "partial")


def test_legend_matches_extracted_categories() -> None:
    assert LEGEND_TYPES == tuple(c.kind for c in CATEGORIES)
    assert DEFAULT_VISIBLE_TYPES < set(LEGEND_TYPES)
