#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TEI → annotations JSON.
CLI:
  python -m teilens --tei paper.tei.xml --out annotations.json
  python -m teilens --pdf paper.pdf --server http://localhost:8070 --page 1 --types title,author
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from .errors import GrobidRequestError, MalformedInputError
from .grobid_client import DEFAULT_SERVER, fetch_fulltext_tei
from .index import by_page, by_types, count_by_type
from .models import AnnotationType
from .tei_extractor import parse_tei


def _types(value: str):
    try:
        return {AnnotationType(v.strip()) for v in value.split(",") if v.strip()}
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="teilens", description="GROBID TEI → positioned annotations")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--tei", help="TEI XML produced by GROBID")
    src.add_argument("--pdf", help="PDF to send to GROBID first")
    ap.add_argument("--server", default=DEFAULT_SERVER)
    ap.add_argument("--timeout", type=int, default=120)
    ap.add_argument("--tei-out", default="", help="where to keep the TEI fetched for --pdf")
    ap.add_argument("--page", type=int, default=None, help="only annotations on this page")
    ap.add_argument("--types", type=_types, default=None, help="comma separated annotation types")
    ap.add_argument("--out", default="", help="write JSON here instead of stdout")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        if args.pdf:
            tei = fetch_fulltext_tei(args.server, args.pdf, timeout=args.timeout)
            tei_path = Path(args.tei_out) if args.tei_out else Path(args.pdf).with_suffix(".tei.xml")
            tei_path.write_text(tei, encoding="utf-8")
        else:
            tei = Path(args.tei).read_bytes()
        doc = parse_tei(tei)
    except (GrobidRequestError, MalformedInputError, OSError) as exc:
        print(f"[teilens] error: {exc}", file=sys.stderr)
        return 1

    annotations = list(doc.annotations)
    if args.page is not None:
        annotations = by_page(annotations, args.page)
    if args.types is not None:
        annotations = by_types(annotations, args.types)

    payload = doc.to_dict()
    payload["annotations"] = [a.model_dump(mode="json", exclude_none=True) for a in annotations]
    text = json.dumps(payload, indent=2, ensure_ascii=False)
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    else:
        print(text)

    counts = ", ".join(f"{t.value}={n}" for t, n in count_by_type(annotations).items())
    print(f"[teilens] annotations={len(annotations)} ({counts or 'none'}) out={args.out or '-'}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
