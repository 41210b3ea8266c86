"""
Models/Form.py - Data types produced by the locator and submitter.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

#: Synthetic text target used when a form exposes no recognisable text field.
ARRAY_TEXT_FIELD: str = "text[]"


@dataclass(frozen=True)
class FormDescriptor:
    """Structural summary of the generation form discovered on a page."""

    action: str
    """Absolute submission URL (or the raw action if it could not be resolved)."""

    method: str = "POST"
    """Uppercase HTTP method."""

    hidden_fields: Mapping[str, str] = field(default_factory=dict, hash=False)
    """Default name/value pairs replayed verbatim on submission. Read-only."""

    text_field_names: tuple[str, ...] = (ARRAY_TEXT_FIELD,)
    """Fields that receive caller text, in document order. Never empty."""

    file_field_names: tuple[str, ...] = ()
    """Names of ``file`` inputs. Recorded only; never submitted."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "hidden_fields", MappingProxyType(dict(self.hidden_fields)))

    @property
    def is_array_style(self) -> bool:
        """*True* when the only text target is an array-style (``[]``) name."""
        return (
            len(self.text_field_names) == 1
            and self.text_field_names[0].endswith("[]")
        )


@dataclass(frozen=True)
class SubmissionResult:
    """Response of a form submission after redirect handling."""

    status_code: int
    """Final HTTP status."""

    body: str
    """Raw response body text."""

    final_url: str
    """URL the body was actually served from."""
