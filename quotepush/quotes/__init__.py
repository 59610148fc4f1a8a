"""Package for quote provider modules."""

from .provider import FALLBACK_QUOTES, QuoteFetcher, QuoteFetchError

__all__ = ["FALLBACK_QUOTES", "QuoteFetcher", "QuoteFetchError"]
