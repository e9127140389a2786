"""
Shared utilities and exceptions for content fetchers.
"""

import base64
from typing import Tuple

import requests

from common.display import err_console, format_size

FETCH_TIMEOUT = 30
REQUEST_HEADERS = {"User-Agent": "Mozilla/5.0"}


class ContentFetchError(Exception):
    """Base exception for content fetching errors that should be raised to caller."""
    pass


class RateLimitError(ContentFetchError):
    """Raised when rate limiting (HTTP 429) is encountered."""
    pass


def clamp_text(text: str, max_chars: int) -> Tuple[str, bool]:
    """
    Cut text to at most max_chars characters.

    Unlike a sentence-aware truncation, the cut is exact: the result is the
    first max_chars characters with nothing appended.

    Args:
        text: Text to clamp
        max_chars: Maximum characters kept

    Returns:
        Tuple of (clamped text, was_truncated boolean)
    """
    if len(text) <= max_chars:
        return text, False
    return text[:max_chars], True


def _get(url: str, timeout: int) -> requests.Response:
    """GET a URL, translating transport and HTTP failures to ContentFetchError."""
    try:
        response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout, allow_redirects=True)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code
        if status == 429:
            raise RateLimitError(f"Rate limited (HTTP 429) when fetching {url}") from e
        raise ContentFetchError(f"HTTP {status} fetching {url}") from e
    except requests.RequestException as e:
        raise ContentFetchError(f"Network error fetching {url}: {e}") from e
    return response


def fetch_page_source(url: str, timeout: int = FETCH_TIMEOUT, verbose: int = 0) -> str:
    """
    Download the raw HTML/script source of a page.

    Args:
        url: Page URL
        timeout: Request timeout in seconds
        verbose: Verbosity level (0=quiet, 1=details)

    Returns:
        Decoded page source

    Raises:
        RateLimitError: When HTTP 429 is encountered
        ContentFetchError: On any other network or HTTP error
    """
    response = _get(url, timeout)
    text = response.text
    if verbose:
        err_console.print(f"[dim]  Fetched page source: {format_size(len(text))}[/dim]")
    return text


def fetch_audio_base64(url: str, timeout: int = FETCH_TIMEOUT, verbose: int = 0) -> str:
    """
    Download an audio stream and return it base64-encoded.

    The result is ready to pass to the transcriber.

    Raises:
        RateLimitError: When HTTP 429 is encountered
        ContentFetchError: On any other network or HTTP error
    """
    response = _get(url, timeout)
    data = response.content
    if not data:
        raise ContentFetchError(f"Empty audio response from {url}")
    if verbose:
        err_console.print(f"[dim]  Fetched audio: {len(data):,} bytes[/dim]")
    return base64.b64encode(data).decode("ascii")
