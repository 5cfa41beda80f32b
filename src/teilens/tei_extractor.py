"""
GROBID TEI → annotations (typed rectangles with page + bbox) and document metadata.

Library:
  doc = parse_tei(tei_xml)
  doc.annotations   # tuple of Annotation, ids annotation-0 .. annotation-(n-1)
  doc.metadata      # DocumentMetadata

Elements are matched by local name, so TEI with or without the
http://www.tei-c.org/ns/1.0 namespace is accepted.
"""
from __future__ import annotations
import logging
import re
from typing import Callable, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

from lxml import etree

from .builder import IdSequence, build_annotation
from .coords import decode_coords
from .errors import MalformedInputError
from .models import Annotation, AnnotationType, DocumentMetadata, ParsedDocument

logger = logging.getLogger(__name__)

STEP_RE = re.compile(r"^(?P<tag>\w+)(?:\[(?P<attr>\w+)=(?P<value>[\w-]+)\])?$")
YEAR_RE = re.compile(r"^\d{4}")
REFERENCE_MAX_AUTHORS = 3
REFERENCE_RAW_CHARS = 100


# ---------- element queries ----------
class Step(NamedTuple):
    tag: str
    attr: Optional[str] = None
    value: Optional[str] = None

    def matches(self, el: etree._Element) -> bool:
        if etree.QName(el).localname != self.tag:
            return False
        return self.attr is None or el.get(self.attr) == self.value


class Query:
    """Descendant path such as ``titleStmt title[type=main]``.

    ``iter(node)`` yields matches in document order. Ancestor steps may sit
    anywhere above the match, including above ``node`` itself.
    """

    def __init__(self, path: str):
        self.path = path
        self.steps: Tuple[Step, ...] = tuple(_compile_step(part) for part in path.split())

    def __repr__(self) -> str:
        return f"Query({self.path!r})"

    def iter(self, node: etree._Element) -> Iterator[etree._Element]:
        *ancestors, target = self.steps
        candidates = node.iter() if node.getparent() is None else node.iterdescendants()
        for el in _elements(candidates):
            if target.matches(el) and _has_ancestors(el, ancestors):
                yield el

    def first(self, node: etree._Element) -> Optional[etree._Element]:
        return next(self.iter(node), None)


def _compile_step(part: str) -> Step:
    m = STEP_RE.match(part)
    if not m:
        raise ValueError(f"bad query step: {part!r}")
    return Step(m.group("tag"), m.group("attr"), m.group("value"))


def _elements(nodes: Iterable) -> Iterator[etree._Element]:
    # comments and processing instructions carry a non-string tag
    return (n for n in nodes if isinstance(n.tag, str))


def _has_ancestors(el: etree._Element, steps: List[Step]) -> bool:
    i = len(steps) - 1
    node = el.getparent()
    while i >= 0 and node is not None:
        if steps[i].matches(node):
            i -= 1
        node = node.getparent()
    return i < 0


class CategoryMatches:
    """Restartable, lazy sequence of the elements matched for one category."""

    def __init__(self, root: etree._Element, query: Query):
        self.root = root
        self.query = query

    def __iter__(self) -> Iterator[etree._Element]:
        return self.query.iter(self.root)


# ---------- text helpers ----------
def element_text(el: Optional[etree._Element]) -> str:
    if el is None:
        return ""
    return "".join(el.itertext())


def _first_descendant(el: etree._Element, tag: str) -> Optional[etree._Element]:
    for d in _elements(el.iterdescendants()):
        if etree.QName(d).localname == tag:
            return d
    return None


def person_name(pers_name: etree._Element) -> str:
    forename = element_text(_first_descendant(pers_name, "forename"))
    surname = element_text(_first_descendant(pers_name, "surname"))
    return f"{forename} {surname}".strip()


def author_text(el: etree._Element) -> str:
    pers = _first_descendant(el, "persName")
    return person_name(pers) if pers is not None else element_text(el)


def _caption_text(fallback: str) -> Callable[[etree._Element], str]:
    def caption(el: etree._Element) -> str:
        head = _first_descendant(el, "head")
        return element_text(head) if head is not None else fallback
    return caption


REF_TITLE = Query("analytic title[type=main]")
REF_AUTHORS = Query("analytic author persName")
REF_DATE = Query("monogr imprint date")


def reference_text(bibl: etree._Element) -> str:
    """'A One, B Two, C Three. Title (2019)' with fallbacks to raw text and 'Reference'."""
    title = element_text(REF_TITLE.first(bibl))
    names = [person_name(p) for p in REF_AUTHORS.iter(bibl)]
    text = ", ".join(names[:REFERENCE_MAX_AUTHORS])
    if title:
        text = f"{text}. {title}" if text else title
    date = REF_DATE.first(bibl)
    when = (date.get("when") or "") if date is not None else ""
    if when:
        # only the year is kept: "2019-05-01" renders as "(2019)", not the full date
        m = YEAR_RE.match(when)
        text += f" ({m.group(0) if m else when})"
    return text or element_text(bibl)[:REFERENCE_RAW_CHARS] or "Reference"


# ---------- categories ----------
class Category(NamedTuple):
    kind: AnnotationType
    query: Query
    text: Callable[[etree._Element], str]


# Order matters: annotation ids are numbered in this order.
CATEGORIES: Tuple[Category, ...] = (
    Category(AnnotationType.TITLE, Query("titleStmt title[type=main]"), element_text),
    Category(AnnotationType.AUTHOR, Query("sourceDesc biblStruct analytic author"), author_text),
    Category(AnnotationType.ABSTRACT, Query("profileDesc abstract div[type=abstract]"), element_text),
    Category(AnnotationType.SECTION, Query("body div head"), element_text),
    Category(AnnotationType.REFERENCE, Query("back div[type=references] listBibl biblStruct"), reference_text),
    Category(AnnotationType.FIGURE, Query("body figure[type=figure]"), _caption_text("Figure")),
    Category(AnnotationType.TABLE, Query("body figure[type=table]"), _caption_text("Table")),
    Category(AnnotationType.KEYWORD, Query("profileDesc textClass keywords term"), element_text),
    Category(AnnotationType.AFFILIATION, Query("sourceDesc biblStruct analytic author affiliation"), element_text),
    Category(AnnotationType.FORMULA, Query("body formula"), element_text),
)
CATEGORY_BY_KIND = {c.kind: c for c in CATEGORIES}


def iter_category(root: etree._Element, kind: AnnotationType) -> CategoryMatches:
    return CategoryMatches(root, CATEGORY_BY_KIND[kind].query)


def find_coords(el: etree._Element) -> Optional[str]:
    """``coords`` of the element itself, else of its first descendant that has one."""
    own = el.get("coords")
    if own:
        return own
    for d in _elements(el.iterdescendants()):
        value = d.get("coords")
        if value is not None:
            return value
    return None


def iter_annotations(root: etree._Element, ids: IdSequence) -> Iterator[Annotation]:
    for category in CATEGORIES:
        for el in iter_category(root, category.kind):
            runs = decode_coords(find_coords(el))
            if not runs:
                logger.debug("%s element on line %s has no usable coords, skipped",
                             category.kind.value, el.sourceline)
                continue
            text = category.text(el)
            for run in runs:
                yield build_annotation(next(ids), category.kind, run, text)


# ---------- metadata ----------
META_TITLE = Query("titleStmt title[type=main]")
META_AUTHORS = Query("sourceDesc biblStruct analytic author persName")
META_ABSTRACT = Query("profileDesc abstract")
META_KEYWORDS = Query("profileDesc textClass keywords term")
META_DOI = Query("sourceDesc biblStruct idno[type=DOI]")
META_DATE = Query("publicationStmt date")


def _clean(text: str) -> Optional[str]:
    text = (text or "").strip()
    return text or None


def extract_metadata(root: etree._Element) -> DocumentMetadata:
    authors = [name for name in (person_name(p) for p in META_AUTHORS.iter(root)) if name]
    keywords = [kw for kw in (_clean(element_text(t)) for t in META_KEYWORDS.iter(root)) if kw]
    date = META_DATE.first(root)
    return DocumentMetadata(
        title=_clean(element_text(META_TITLE.first(root))),
        authors=authors or None,
        abstract=_clean(element_text(META_ABSTRACT.first(root))),
        keywords=keywords or None,
        doi=_clean(element_text(META_DOI.first(root))),
        publication_date=_clean(date.get("when") or element_text(date)) if date is not None else None,
    )


# ---------- public API ----------
def load_tei(tei_xml: Union[str, bytes]) -> etree._Element:
    """Parse TEI text into an lxml root element, or raise MalformedInputError."""
    data = tei_xml.encode("utf-8") if isinstance(tei_xml, str) else tei_xml
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    try:
        return etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        logger.warning("TEI document is not well-formed: %s", exc)
        raise MalformedInputError(f"Failed to parse GROBID TEI XML: {exc}") from exc


def parse_tei(tei_xml: Union[str, bytes]) -> ParsedDocument:
    """TEI text → ParsedDocument. Either the whole document or MalformedInputError."""
    root = load_tei(tei_xml)
    ids = IdSequence()
    annotations = tuple(iter_annotations(root, ids))
    logger.debug("parsed %d annotations", ids.issued)
    return ParsedDocument(annotations=annotations, metadata=extract_metadata(root))
