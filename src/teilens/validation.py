"""Optional box checks. Parsing never applies these; callers opt in."""
from __future__ import annotations
from typing import Iterable, List, NamedTuple, Optional

from .models import Annotation


class BoxIssue(NamedTuple):
    annotation: Annotation
    reason: str


def box_issues(annotation: Annotation, page_count: Optional[int] = None) -> List[str]:
    reasons = []
    if annotation.bbox.width < 0:
        reasons.append("negative width")
    if annotation.bbox.height < 0:
        reasons.append("negative height")
    if annotation.page < 1:
        reasons.append("page before first page")
    elif page_count is not None and annotation.page > page_count:
        reasons.append(f"page after last page ({page_count})")
    return reasons


def find_invalid(annotations: Iterable[Annotation], page_count: Optional[int] = None) -> List[BoxIssue]:
    return [BoxIssue(a, "; ".join(r)) for a in annotations for r in [box_issues(a, page_count)] if r]


def drop_invalid(annotations: Iterable[Annotation], page_count: Optional[int] = None) -> List[Annotation]:
    return [a for a in annotations if not box_issues(a, page_count)]
