from .errors import GrobidRequestError, MalformedInputError, TeilensError
from .index import by_page, by_types, filter_annotations
from .models import Annotation, AnnotationType, BoundingBox, DocumentMetadata, ParsedDocument
from .selection import SelectionState
from .tei_extractor import parse_tei
from .viewer import ViewerState

__all__ = [
    "Annotation", "AnnotationType", "BoundingBox", "DocumentMetadata", "ParsedDocument",
    "TeilensError", "MalformedInputError", "GrobidRequestError",
    "parse_tei", "by_page", "by_types", "filter_annotations",
    "SelectionState", "ViewerState",
]
