from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from .models import Annotation

logger = logging.getLogger(__name__)

SelectHandler = Callable[[Annotation], Any]


class SelectionState:
    """At most one active annotation.

    Transitions:
      click(a)            -> Selected(a), ``on_select(a)`` is called
      document_reparsed() -> Unselected
      clear()             -> Unselected
    Events are expected one at a time from the rendering layer.
    """

    def __init__(self, on_select: Optional[SelectHandler] = None):
        self._selected: Optional[Annotation] = None
        self.on_select = on_select

    @property
    def selected(self) -> Optional[Annotation]:
        return self._selected

    @property
    def is_selected(self) -> bool:
        return self._selected is not None

    def is_active(self, annotation: Annotation) -> bool:
        return self._selected is not None and self._selected.id == annotation.id

    def click(self, annotation: Annotation) -> None:
        self._selected = annotation
        if self.on_select is not None:
            self.on_select(annotation)

    def document_reparsed(self) -> None:
        # ids from a previous parse may point at a different element now
        self._selected = None

    def clear(self) -> None:
        self._selected = None
