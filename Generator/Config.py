"""
Generator/Config.py - Per-call configuration for the generation pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_USER_AGENT: str = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/115.0 Safari/537.36"
)


@dataclass(frozen=True)
class GeneratorOptions:
    """Options passed explicitly to :func:`Generator.generate`."""

    user_agent: str = DEFAULT_USER_AGENT
    """``User-Agent`` sent with the page fetch and the submission."""

    extra_headers: Mapping[str, str] = field(default_factory=dict, hash=False)
    """Additional request headers (cookies, referer, ...). Read-only."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra_headers", MappingProxyType(dict(self.extra_headers)))

    def headers(self) -> dict[str, str]:
        """Return the request headers for both network calls."""
        headers = dict(self.extra_headers)
        headers["User-Agent"] = self.user_agent or DEFAULT_USER_AGENT
        return headers
