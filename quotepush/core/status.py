"""Status line, toast and the console view they render to."""

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOAST_SECONDS = 3.0


class StatusKind:
    NEUTRAL = "neutral"
    ERROR = "error"
    LOADING = "loading"
    SUCCESS = "success"

    ALL = (NEUTRAL, ERROR, LOADING, SUCCESS)


class ConsoleView:
    """Terminal stand-in for the page: two quote regions, a status line and a toast."""

    def __init__(self, echo: bool = True) -> None:
        self.echo = echo
        self.quote_text = ""
        self.quote_author = ""
        self.status_text = ""
        self.status_kind = StatusKind.NEUTRAL
        self.toast_text = ""
        self.toast_visible = False

    def _print(self, line: str) -> None:
        if self.echo:
            print(line)

    def render_quote(self, text: str, author: str) -> None:
        self.quote_text = text
        self.quote_author = author
        self._print(text)
        if author:
            self._print(f"    {author}")

    def render_status(self, text: str, kind: str) -> None:
        self.status_text = text
        self.status_kind = kind
        self._print(f"[{kind}] {text}")

    def show_toast(self, text: str) -> None:
        self.toast_text = text
        self.toast_visible = True
        self._print(f"* {text}")

    def hide_toast(self) -> None:
        self.toast_visible = False


class StatusLine:
    """Persistent status message; stays until the next update."""

    def __init__(self, view: ConsoleView) -> None:
        self.view = view

    @property
    def text(self) -> str:
        return self.view.status_text

    @property
    def kind(self) -> str:
        return self.view.status_kind

    def update(self, message: str, kind: str = StatusKind.NEUTRAL) -> None:
        if kind not in StatusKind.ALL:
            raise ValueError(f"Unknown status kind: {kind!r}")
        self.view.render_status(message, kind)


class Toaster:
    """Shows a short-lived message that hides itself after `duration` seconds.

    A new toast replaces the visible one and restarts the timer.
    """

    def __init__(
        self,
        view: ConsoleView,
        duration: float = DEFAULT_TOAST_SECONDS,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        self.view = view
        self.duration = duration
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._lock = threading.Lock()

    def show(self, message: str) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self.view.show_toast(message)
            timer = self._timer_factory(self.duration, self._hide, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _hide(self, generation: int) -> None:
        # A timer that already fired when a newer toast arrived must not hide it.
        with self._lock:
            if generation != self._generation:
                return
            logger.debug("hiding toast: %s", self.view.toast_text)
            self.view.hide_toast()
