"""
Generator/Generator.py - End-to-end effect generation.

Composes page fetch -> form discovery -> submission -> image extraction,
with the JSON-body fallback applied when the extraction cascade finds
nothing. Each stage fails fast; no retries are made here.

Usage::

    url = await generate(
        "https://textpro.me/create-a-graffiti-text-effect-178.html",
        ["Hello", "World"],
    )
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

import httpx

from Extractor import ResultExtractor, from_json_body
from Generator.Config import GeneratorOptions
from Locator import FormLocator
from Models import DiscoveryFailure, ExtractionFailure, FetchFailure
from Submitter import FormSubmitter, TextInput

logger = logging.getLogger(__name__)

#: Effect sites served by :func:`generate_effect`. They share one pipeline.
EFFECT_SERVICES: tuple[str, ...] = ("textpro", "photooxy", "ephoto")


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


async def fetch_page(
    client: httpx.AsyncClient,
    page_url: str,
    headers: Mapping[str, str],
) -> tuple[str, str]:
    """GET *page_url* and return ``(html, final_url)``.

    Raises :class:`FetchFailure` on a non-2xx status.
    """
    response = await client.get(page_url, headers=dict(headers), follow_redirects=True)
    if not response.is_success:
        raise FetchFailure(page_url, response.status_code, response.reason_phrase)
    return response.text, str(response.url)


async def generate(
    page_url: str,
    texts: TextInput,
    options: Optional[GeneratorOptions] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Generate an effect image on *page_url* and return its URL.

    *client* is used as-is when given; otherwise a client is opened for the
    duration of the call. No timeout is applied; wrap the call in
    :func:`asyncio.wait_for` for a deadline.
    """
    options = options or GeneratorOptions()
    if client is not None:
        return await _run(client, page_url, texts, options)
    async with httpx.AsyncClient(timeout=None) as own_client:
        return await _run(own_client, page_url, texts, options)


async def _run(
    client: httpx.AsyncClient,
    page_url: str,
    texts: TextInput,
    options: GeneratorOptions,
) -> str:
    headers = options.headers()
    logger.info("Generating effect from %s", page_url)

    html, base_url = await fetch_page(client, page_url, headers)

    form = FormLocator().locate(html, base_url)
    if form is None:
        raise DiscoveryFailure(page_url)

    result = await FormSubmitter(client).submit(form, texts, headers)

    image = ResultExtractor().extract(result.body, result.final_url)
    if not image:
        image = from_json_body(result.body, result.final_url)
    if not image:
        logger.warning(
            "No result image in %d-byte response from %s", len(result.body), result.final_url
        )
        raise ExtractionFailure(result.final_url, result.body)

    logger.info("Generated image: %s", image)
    return image


# ---------------------------------------------------------------------------
# Effect services
# ---------------------------------------------------------------------------


async def generate_effect(
    service: str,
    page_url: str,
    texts: TextInput,
    options: Optional[GeneratorOptions] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Run :func:`generate` for one of :data:`EFFECT_SERVICES`."""
    if service not in EFFECT_SERVICES:
        raise ValueError(f"Unknown service: {service!r}")
    logger.debug("Service %s selected", service)
    return await generate(page_url, texts, options, client)


async def generate_textpro(
    page_url: str,
    texts: TextInput,
    options: Optional[GeneratorOptions] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Generate a TextPro effect image and return its URL."""
    return await generate_effect("textpro", page_url, texts, options, client)


async def generate_photooxy(
    page_url: str,
    texts: TextInput,
    options: Optional[GeneratorOptions] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Generate a PhotoOxy effect image and return its URL."""
    return await generate_effect("photooxy", page_url, texts, options, client)


async def generate_ephoto(
    page_url: str,
    texts: TextInput,
    options: Optional[GeneratorOptions] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """Generate an Ephoto360 effect image and return its URL."""
    return await generate_effect("ephoto", page_url, texts, options, client)
