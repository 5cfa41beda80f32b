from unittest.mock import Mock

from teilens.builder import build_annotation
from teilens.coords import CoordinateRun
from teilens.models import AnnotationType
from teilens.selection import SelectionState

A = build_annotation("annotation-0", AnnotationType.TITLE, CoordinateRun(1, 0, 0, 1, 1), "a")
B = build_annotation("annotation-1", AnnotationType.AUTHOR, CoordinateRun(1, 0, 0, 1, 1), "b")


def test_starts_unselected() -> None:
    state = SelectionState()
    assert state.selected is None
    assert not state.is_selected


def test_click_selects_and_notifies() -> None:
    handler = Mock(return_value="ignored")
    state = SelectionState(on_select=handler)
    state.click(A)
    assert state.selected == A
    handler.assert_called_once_with(A)


def test_click_overwrites_previous() -> None:
    state = SelectionState()
    state.click(A)
    state.click(B)
    assert state.selected == B
    assert state.is_active(B) and not state.is_active(A)


def test_clicking_same_annotation_keeps_it() -> None:
    handler = Mock()
    state = SelectionState(on_select=handler)
    state.click(A)
    state.click(A)
    assert state.selected == A
    assert handler.call_count == 2


def test_reparse_and_clear_unselect() -> None:
    state = SelectionState()
    state.click(A)
    state.document_reparsed()
    assert state.selected is None
    state.click(B)
    state.clear()
    assert state.selected is None
    state.clear()
    assert state.selected is None
