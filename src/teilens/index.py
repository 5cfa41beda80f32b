from __future__ import annotations
from collections import Counter
from typing import Dict, Iterable, List, Sequence

from .models import Annotation, AnnotationType


def by_page(annotations: Iterable[Annotation], page: int) -> List[Annotation]:
    return [a for a in annotations if a.page == page]


def by_types(annotations: Iterable[Annotation], types: Iterable[AnnotationType]) -> List[Annotation]:
    wanted = frozenset(types)
    return [a for a in annotations if a.type in wanted]


def filter_annotations(annotations: Iterable[Annotation], page: int,
                       visible_types: Iterable[AnnotationType]) -> List[Annotation]:
    """Annotations drawn on ``page``: right page and a visible type, original order."""
    wanted = frozenset(visible_types)
    return [a for a in annotations if a.page == page and a.type in wanted]


def count_by_type(annotations: Iterable[Annotation]) -> Dict[AnnotationType, int]:
    counts = Counter(a.type for a in annotations)
    return {t: counts[t] for t in AnnotationType if counts[t]}


def pages_with_annotations(annotations: Sequence[Annotation]) -> List[int]:
    return sorted({a.page for a in annotations})
