from __future__ import annotations
import logging
from pathlib import Path
from typing import Union

import requests

from .errors import GrobidRequestError

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "http://localhost:8070"
FULLTEXT_ENDPOINT = "/api/processFulltextDocument"
# element kinds GROBID should emit ``coords`` for
TEI_COORDINATES = ("title", "persName", "affiliation", "head", "biblStruct", "figure", "formula", "s", "p")


def fetch_fulltext_tei(server: str, pdf_path: Union[str, Path], timeout: int = 120) -> str:
    """POST a PDF to GROBID and return the TEI text with coordinates."""
    url = server.rstrip("/") + FULLTEXT_ENDPOINT
    data = [("teiCoordinates", kind) for kind in TEI_COORDINATES]
    logger.info("sending %s to %s", pdf_path, url)
    try:
        with open(pdf_path, "rb") as f:
            r = requests.post(url, files={"input": f}, data=data, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise GrobidRequestError(f"GROBID request to {url} failed: {exc}") from exc
    return r.text
