from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Set, Union

from .errors import MalformedInputError
from .index import count_by_type, filter_annotations
from .models import Annotation, AnnotationType, DocumentMetadata, ParsedDocument
from .selection import SelectHandler, SelectionState
from .styles import DEFAULT_VISIBLE_TYPES
from .tei_extractor import parse_tei

logger = logging.getLogger(__name__)

PARSE_ERROR_MESSAGE = "Failed to parse structure data"


class ViewerState:
    """State a PDF viewer keeps next to the rendered page.

    A TEI document that fails to parse leaves the viewer with no annotations
    and ``error`` set; the PDF itself stays viewable.
    """

    def __init__(self, page_count: Optional[int] = None, on_select: Optional[SelectHandler] = None,
                 visible_types: Iterable[AnnotationType] = DEFAULT_VISIBLE_TYPES):
        self.page_count = page_count
        self.page = 1
        self.visible_types: Set[AnnotationType] = set(visible_types)
        self.selection = SelectionState(on_select)
        self.document = ParsedDocument()
        self.error: Optional[str] = None

    @property
    def annotations(self):
        return self.document.annotations

    @property
    def metadata(self) -> DocumentMetadata:
        return self.document.metadata

    def load_tei(self, tei_xml: Union[str, bytes]) -> bool:
        try:
            document = parse_tei(tei_xml)
        except MalformedInputError as exc:
            logger.error("Error parsing GROBID annotations: %s", exc)
            document = ParsedDocument()
            self.error = PARSE_ERROR_MESSAGE
        else:
            self.error = None
        self.show(document)
        return self.error is None

    def show(self, document: ParsedDocument) -> None:
        """Replace the current document with an already parsed one."""
        self.document = document
        self.selection.document_reparsed()

    # ---------- visibility ----------
    def visible_annotations(self) -> List[Annotation]:
        return filter_annotations(self.document.annotations, self.page, self.visible_types)

    def set_visible_types(self, types: Iterable[AnnotationType]) -> None:
        self.visible_types = set(types)

    def toggle_type(self, kind: AnnotationType) -> bool:
        """Flip visibility of ``kind``; returns the new state."""
        if kind in self.visible_types:
            self.visible_types.discard(kind)
            return False
        self.visible_types.add(kind)
        return True

    def counts(self):
        return count_by_type(self.document.annotations)

    # ---------- paging ----------
    def go_to_page(self, page: int) -> int:
        page = max(1, page)
        if self.page_count is not None:
            page = min(page, self.page_count)
        self.page = page
        return page

    def next_page(self) -> int:
        return self.go_to_page(self.page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.page - 1)

    # ---------- selection ----------
    def click(self, annotation: Annotation) -> None:
        self.selection.click(annotation)

    @property
    def selected(self) -> Optional[Annotation]:
        return self.selection.selected
