from typing import Any, Callable, Dict, Optional

from quotepush.core.clipboard import ClipboardPublisher
from quotepush.core.publisher import GitHubPublisher
from quotepush.core.state import QuoteState
from quotepush.core.status import DEFAULT_TOAST_SECONDS, ConsoleView, StatusLine, Toaster
from quotepush.github.contents_client import GITHUB_API_URL, GitHubContentsClient
from quotepush.quotes.provider import DEFAULT_FALLBACK_DELAY, QUOTABLE_RANDOM_URL, QuoteFetcher


def _seconds(config: Dict[str, Any], key: str, default: float) -> float:
    value = config.get(key)
    if value is None:
        return default
    return float(value)


def _timeout(config: Dict[str, Any]) -> Optional[float]:
    value = config.get('timeout')
    if value is None:
        return None
    return float(value)


def build_fetcher(config: Dict[str, Any], state: QuoteState, view: ConsoleView) -> QuoteFetcher:
    delay = _seconds(config, 'fallback_delay_seconds', DEFAULT_FALLBACK_DELAY)
    return QuoteFetcher(
        state,
        view,
        url=config.get('quote_url') or QUOTABLE_RANDOM_URL,
        timeout=_timeout(config),
        fallback_delay=max(0.0, delay),
    )


def build_toaster(config: Dict[str, Any], view: ConsoleView) -> Toaster:
    return Toaster(view, duration=_seconds(config, 'toast_seconds', DEFAULT_TOAST_SECONDS))


def build_client_factory(config: Dict[str, Any]) -> Callable[[str], GitHubContentsClient]:
    github_cfg = config.get('github') or {}
    api_url = github_cfg.get('api_url') or GITHUB_API_URL
    dry_run = bool(github_cfg.get('dry_run', False))
    timeout = _timeout(config)

    def factory(token: str) -> GitHubContentsClient:
        return GitHubContentsClient(token, api_url=api_url, timeout=timeout, dry_run=dry_run)

    return factory


def build_clipboard(state: QuoteState, toaster: Toaster) -> ClipboardPublisher:
    return ClipboardPublisher(state, toaster)


def build_publisher(
    config: Dict[str, Any],
    state: QuoteState,
    view: ConsoleView,
    toaster: Toaster,
) -> GitHubPublisher:
    return GitHubPublisher(state, build_client_factory(config), StatusLine(view), toaster)
