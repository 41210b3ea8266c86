"""
Locator/Locator.py - Generation-form discovery.

Given raw page markup, picks the single ``<form>`` most likely responsible
for generating the effect and describes it as a :class:`FormDescriptor`:
  - Submission target and method
  - Hidden / default fields to replay verbatim
  - Fields that accept caller text, and ``file`` inputs (recorded only)
"""
from __future__ import annotations

import logging
import re
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from Models import ARRAY_TEXT_FIELD, FormDescriptor

logger = logging.getLogger(__name__)

# Any of these in a field name marks the form as a generator form
_FORM_HINTS: tuple[str, ...] = ("token", "text", "captcha", "submit")

_INPUT_TAGS: list[str] = ["input", "textarea", "select"]

_TEXT_NAME_RE = re.compile(r"text|word|name", re.IGNORECASE)

_KNOWN_METHODS: frozenset[str] = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE"})


def resolve_url(base: str, relative: str) -> str:
    """Resolve *relative* against *base*, returning *relative* unchanged on failure."""
    try:
        return urljoin(base, relative)
    except ValueError:
        return relative


class FormLocator:
    """Stateless form finder.

    Usage::

        form = FormLocator().locate(html, "https://textpro.me/neon-text-effect-68.html")
        if form is None:
            ...  # page layout unrecognised
    """

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def locate(self, html: str, page_url: str) -> Optional[FormDescriptor]:
        """Return a descriptor for the generation form in *html*, or *None*.

        *None* means no ``<form>`` exists at all; it is not an error.
        *page_url* must be non-blank; it is the fallback submission target.
        """
        page_url = (page_url or "").strip()
        if not page_url:
            raise ValueError("page_url must be a non-empty address")

        soup = BeautifulSoup(html or "", "html.parser")
        forms = soup.find_all("form")
        if not forms:
            logger.debug("No <form> elements on %s", page_url)
            return None

        chosen = self._choose_form(forms)
        return self._describe(chosen, page_url)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def _choose_form(self, forms: list[Tag]) -> Tag:
        """Pick the first form whose field names carry a generator hint.

        Falls back to the first form in the document.
        """
        for idx, form in enumerate(forms):
            names = [n.lower() for n in self._field_names(form)]
            if any(hint in name for name in names for hint in _FORM_HINTS):
                logger.debug("Selected form #%d (field names %s)", idx, names)
                return form
        logger.debug("No form matched name hints, falling back to the first of %d", len(forms))
        return forms[0]

    @staticmethod
    def _field_names(form: Tag) -> list[str]:
        return [el.get("name") for el in form.find_all(_INPUT_TAGS) if el.get("name")]

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def _describe(self, form: Tag, page_url: str) -> FormDescriptor:
        hidden_fields: dict[str, str] = {}
        text_field_names: list[str] = []
        file_field_names: list[str] = []

        for el in form.find_all(_INPUT_TAGS):
            name = el.get("name")
            if not name:
                continue
            input_type = (el.get("type") or "").strip().lower()
            value = el.get("value")

            if input_type in ("hidden", "submit"):
                hidden_fields[name] = value or ""
            elif input_type == "file":
                file_field_names.append(name)
            else:
                if _TEXT_NAME_RE.search(name) or "[]" in name:
                    text_field_names.append(name)
                # A pre-filled text field doubles as a default
                if value:
                    hidden_fields[name] = value

        if not text_field_names:
            text_field_names.append(ARRAY_TEXT_FIELD)

        action = resolve_url(page_url, (form.get("action") or "").strip() or page_url) or page_url
        method = (form.get("method") or "").strip().upper()
        if method not in _KNOWN_METHODS:
            method = "POST"

        logger.debug(
            "Form %s %s: hidden=%d text=%s files=%d",
            method,
            action,
            len(hidden_fields),
            text_field_names,
            len(file_field_names),
        )
        return FormDescriptor(
            action=action,
            method=method,
            hidden_fields=hidden_fields,
            text_field_names=tuple(text_field_names),
            file_field_names=tuple(file_field_names),
        )


def locate(html: str, page_url: str) -> Optional[FormDescriptor]:
    """Module-level shortcut for :meth:`FormLocator.locate`."""
    return FormLocator().locate(html, page_url)
