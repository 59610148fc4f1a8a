import logging
import random
import time
from typing import Any, Optional

import requests

from quotepush.core.formatting import format_author_line
from quotepush.core.state import Quote, QuoteState
from quotepush.core.status import ConsoleView

QUOTABLE_RANDOM_URL = "https://api.quotable.io/random"
DEFAULT_FALLBACK_DELAY = 1.5

LOADING_TEXT = "Loading quote..."
FAILED_TEXT = "Failed to fetch quote. Please try again."

FALLBACK_QUOTES = (
    Quote("The only way to do great work is to love what you do.", "Steve Jobs"),
    Quote("Life is what happens when you're busy making other plans.", "John Lennon"),
    Quote(
        "The future belongs to those who believe in the beauty of their dreams.",
        "Eleanor Roosevelt",
    ),
)

logger = logging.getLogger(__name__)


class QuoteFetchError(RuntimeError):
    """Raised when the quote provider gives no usable quote."""


class QuoteFetcher:
    """Loads a random quote into the shared state and onto the screen.

    Usage:
        fetcher = QuoteFetcher(state, view)
        quote = fetcher.fetch()
    """

    def __init__(
        self,
        state: QuoteState,
        view: ConsoleView,
        url: str = QUOTABLE_RANDOM_URL,
        timeout: Optional[float] = None,
        fallback_delay: float = DEFAULT_FALLBACK_DELAY,
        rng: Any = random,
    ):
        self.state = state
        self.view = view
        self.url = url
        self.timeout = timeout
        self.fallback_delay = fallback_delay
        self.rng = rng
        self._session = requests.Session()

    def _request_quote(self):
        resp = self._session.get(self.url, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise QuoteFetchError(f"Unexpected payload: {data!r}")
        content = data.get("content")
        author = data.get("author")
        if not isinstance(content, str) or not isinstance(author, str):
            raise QuoteFetchError("Response has no content/author")
        return Quote(content, author)

    def fetch(self) -> Quote:
        """Replaces the current quote with a fresh one, or a fallback on failure."""

        self.view.render_quote(LOADING_TEXT, "")

        try:
            quote = self._request_quote()
        except (requests.RequestException, ValueError, QuoteFetchError) as exc:
            logger.error("Error fetching quote: %s", exc)
            return self._use_fallback()

        self.state.set(quote)
        self.view.render_quote(quote.text, format_author_line(quote.author))
        return quote

    def _use_fallback(self) -> Quote:
        self.view.render_quote(FAILED_TEXT, "")

        quote = self.rng.choice(FALLBACK_QUOTES)
        self.state.set(quote)

        # Shown after a pause so the switch reads like a finished load.
        if self.fallback_delay > 0:
            time.sleep(self.fallback_delay)
        self.view.render_quote(quote.text, format_author_line(quote.author))
        return quote
