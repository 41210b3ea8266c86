"""
Submitter/Submitter.py - Multipart submission of a discovered form.

Replays the form's default fields, assigns the caller's text(s) to the text
targets, sends the request and follows at most one redirect.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Optional, Union

import httpx

from Locator import resolve_url
from Models import FetchFailure, FormDescriptor, SubmissionResult

logger = logging.getLogger(__name__)

TextInput = Union[str, Iterable[str]]

# A redirect chain costs at most 1 + _MAX_REDIRECT_HOPS requests
_MAX_REDIRECT_HOPS: int = 1


def normalize_texts(texts: TextInput) -> list[str]:
    """Return *texts* as a list of strings (a bare string becomes one item)."""
    if isinstance(texts, str):
        return [texts]
    if isinstance(texts, Iterable):
        return [str(t) for t in texts]
    return [str(texts)]


def build_fields(form: FormDescriptor, texts: TextInput) -> list[tuple[str, str]]:
    """Return the ordered ``(name, value)`` pairs to submit for *form*.

    Default fields come first. Texts then go either all under the single
    array-style name, or positionally onto ``text_field_names`` with any
    excess piling onto the last name.
    """
    fields: list[tuple[str, str]] = list(form.hidden_fields.items())
    values = normalize_texts(texts)
    names = form.text_field_names

    if form.is_array_style:
        fields.extend((names[0], text) for text in values)
    else:
        last = len(names) - 1
        for i, text in enumerate(values):
            fields.append((names[min(i, last)], text))
    return fields


def _without_content_type(headers: Optional[Mapping[str, str]]) -> dict[str, str]:
    # The multipart boundary header must win over anything the caller set
    return {k: v for k, v in (headers or {}).items() if k.lower() != "content-type"}


class FormSubmitter:
    """Sends a :class:`FormDescriptor` with caller text over *client*.

    The submitter owns no state beyond the client it was given, so one
    instance may serve concurrent submissions.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._http = client

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    async def submit(
        self,
        form: FormDescriptor,
        texts: TextInput,
        headers: Optional[Mapping[str, str]] = None,
    ) -> SubmissionResult:
        """Submit *form* and return the response after redirect handling.

        Raises :class:`FetchFailure` when the final status is not 2xx.
        Transport errors from httpx propagate unchanged.
        """
        fields = build_fields(form, texts)
        request_headers = _without_content_type(headers)

        logger.debug(
            "Submitting %d field(s) via %s to %s", len(fields), form.method, form.action
        )
        response = await self._send(form, fields, request_headers)

        hops = 0
        while hops < _MAX_REDIRECT_HOPS and self._is_redirect(response):
            location = resolve_url(form.action, response.headers["location"])
            logger.debug("HTTP %d from %s, following to %s", response.status_code, response.url, location)
            response = await self._http.get(
                location, headers=request_headers, follow_redirects=True
            )
            hops += 1

        if not response.is_success:
            raise FetchFailure(
                str(response.url),
                response.status_code,
                response.reason_phrase,
                response.text,
            )

        return SubmissionResult(
            status_code=response.status_code,
            body=response.text,
            final_url=str(response.url),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send(
        self,
        form: FormDescriptor,
        fields: list[tuple[str, str]],
        headers: dict[str, str],
    ) -> httpx.Response:
        """Issue the first hop with redirects disabled."""
        if form.method == "GET":
            # Browsers put GET form data in the query string
            return await self._http.request(
                "GET", form.action, params=fields, headers=headers, follow_redirects=False
            )
        # Filename-less parts are plain form fields; using ``files`` keeps
        # the body multipart and preserves repeated names in order.
        parts = [(name, (None, value)) for name, value in fields]
        return await self._http.request(
            form.method,
            form.action,
            files=parts,
            headers=headers,
            follow_redirects=False,
        )

    @staticmethod
    def _is_redirect(response: httpx.Response) -> bool:
        return 300 <= response.status_code < 400 and bool(response.headers.get("location"))


async def submit(
    form: FormDescriptor,
    texts: TextInput,
    headers: Optional[Mapping[str, str]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SubmissionResult:
    """Submit *form*, using *client* or a short-lived client of our own."""
    if client is not None:
        return await FormSubmitter(client).submit(form, texts, headers)
    async with httpx.AsyncClient(timeout=None) as own_client:
        return await FormSubmitter(own_client).submit(form, texts, headers)
