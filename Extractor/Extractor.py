"""
Extractor/Extractor.py - Locates the generated image in a submission response.

The response is run through an ordered cascade of independent rules; the
first rule returning a URL wins:
  1. ``og:image`` meta tag
  2. Known result-image selectors, then any ``<img>``
  3. Anchors linking to an image file
  4. Any absolute image URL in the raw text (inline script / JSON)
  5. The serving URL itself, when it is an image

:func:`from_json_body` is a separate fallback for callers whose response is
a JSON object with a ``url`` / ``image`` / ``result`` field.
"""
from __future__ import annotations

import json
import logging
import re
from typing import Callable, Optional

from bs4 import BeautifulSoup

from Locator import resolve_url

logger = logging.getLogger(__name__)

Rule = Callable[[BeautifulSoup, str, str], Optional[str]]

IMAGE_SELECTORS: tuple[str, ...] = (
    "img#image-output",
    "img#image",
    "img.result-img",
    "div.thumbnail img",
    "img",
)

JSON_IMAGE_KEYS: tuple[str, ...] = ("url", "image", "result")

_IMAGE_PATH_RE = re.compile(r"\.(png|jpe?g|gif|webp)(\?.*)?$", re.IGNORECASE)
_IMAGE_URL_RE = re.compile(
    r"""https?://[^"' >]+?\.(?:png|jpe?g|gif|webp)(?:\?[^"' >]+)?""",
    re.IGNORECASE,
)


def looks_like_image(url: str) -> bool:
    """Return *True* if *url* ends with an image extension (query allowed)."""
    return bool(url) and _IMAGE_PATH_RE.search(url) is not None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def from_meta_image(document: BeautifulSoup, body: str, base_url: str) -> Optional[str]:
    for selector in ('meta[property="og:image"]', 'meta[name="og:image"]'):
        tag = document.select_one(selector)
        content = (tag.get("content") or "").strip() if tag else ""
        if content:
            return resolve_url(base_url, content)
    return None


def from_image_selectors(document: BeautifulSoup, body: str, base_url: str) -> Optional[str]:
    for selector in IMAGE_SELECTORS:
        for img in document.select(selector):
            src = (img.get("src") or "").strip()
            if src:
                return resolve_url(base_url, src)
    return None


def from_image_anchor(document: BeautifulSoup, body: str, base_url: str) -> Optional[str]:
    for anchor in document.find_all("a", href=True):
        href = anchor["href"].strip()
        if looks_like_image(href):
            return resolve_url(base_url, href)
    return None


def from_raw_text(document: BeautifulSoup, body: str, base_url: str) -> Optional[str]:
    """Scan the unparsed body, for URLs embedded in scripts or JSON."""
    match = _IMAGE_URL_RE.search(body)
    return match.group(0) if match else None


def from_serving_url(document: BeautifulSoup, body: str, base_url: str) -> Optional[str]:
    """Sites that redirect straight to the generated asset."""
    return base_url if looks_like_image(base_url) else None


RULES: tuple[Rule, ...] = (
    from_meta_image,
    from_image_selectors,
    from_image_anchor,
    from_raw_text,
    from_serving_url,
)


# ---------------------------------------------------------------------------
# Extractor
# ---------------------------------------------------------------------------


class ResultExtractor:
    """Applies :data:`RULES` in order. Holds no state between calls."""

    def __init__(self, rules: tuple[Rule, ...] = RULES) -> None:
        self.rules = rules

    def extract(self, body: str, serving_url: str) -> Optional[str]:
        """Return the generated image URL found in *body*, or *None*."""
        document = BeautifulSoup(body or "", "html.parser")
        for rule in self.rules:
            found = rule(document, body or "", serving_url)
            if found:
                logger.debug("Image found by %s: %s", rule.__name__, found)
                return found
        logger.debug("No extraction rule matched response from %s", serving_url)
        return None


def extract(body: str, serving_url: str) -> Optional[str]:
    """Module-level shortcut for :meth:`ResultExtractor.extract`."""
    return ResultExtractor().extract(body, serving_url)


def from_json_body(body: str, base_url: str = "") -> Optional[str]:
    """Return the first non-empty ``url`` / ``image`` / ``result`` string in a JSON body.

    Anything that is not a JSON object with such a field yields *None*.
    """
    try:
        payload = json.loads(body or "")
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    for key in JSON_IMAGE_KEYS:
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return resolve_url(base_url, value.strip()) if base_url else value.strip()
    return None
