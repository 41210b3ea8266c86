"""
Models/Errors.py - Exceptions raised by the generation pipeline.
"""
from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for all pipeline failures."""


class DiscoveryFailure(ScraperError):
    """No usable form was found on the fetched page."""

    def __init__(self, page_url: str) -> None:
        super().__init__(
            f"No suitable form found on {page_url} (site layout may have changed)."
        )
        self.page_url = page_url


class FetchFailure(ScraperError):
    """A page fetch or form submission returned a non-successful status."""

    def __init__(
        self,
        url: str,
        status_code: int,
        reason: str = "",
        body: Optional[str] = None,
    ) -> None:
        super().__init__(f"Request to {url} failed: {status_code} {reason}".rstrip())
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body


class ExtractionFailure(ScraperError):
    """The submission succeeded but no result image could be located.

    The raw response is kept on the exception so a new site-specific
    pattern can be diagnosed from it.
    """

    def __init__(self, final_url: str, body: str) -> None:
        super().__init__(f"Unable to find result image in response from {final_url}.")
        self.final_url = final_url
        self.body = body
