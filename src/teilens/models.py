from __future__ import annotations
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict


class AnnotationType(str, Enum):
    TITLE = "title"
    AUTHOR = "author"
    ABSTRACT = "abstract"
    SECTION = "section"
    REFERENCE = "reference"
    FIGURE = "figure"
    TABLE = "table"
    KEYWORD = "keyword"
    AFFILIATION = "affiliation"
    FORMULA = "formula"
    PARAGRAPH = "paragraph"
    UNKNOWN = "unknown"


class BoundingBox(BaseModel):
    """Rectangle in GROBID point space, origin top-left. Sizes are not checked."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    width: float
    height: float


class Annotation(BaseModel):
    """One typed rectangle on one page, derived from a single coordinate run."""
    model_config = ConfigDict(frozen=True)

    id: str
    type: AnnotationType
    page: int
    bbox: BoundingBox
    text: str
    confidence: Optional[float] = None
    metadata: Optional[Dict[str, Any]] = None


class DocumentMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: Optional[str] = None
    authors: Optional[List[str]] = None
    abstract: Optional[str] = None
    keywords: Optional[List[str]] = None
    doi: Optional[str] = None
    publication_date: Optional[str] = None


class ParsedDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    annotations: Tuple[Annotation, ...] = ()
    metadata: DocumentMetadata = DocumentMetadata()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready dump; metadata fields that were not found are left out."""
        data = self.model_dump(mode="json", exclude_none=True)
        data.setdefault("metadata", {})
        return data
