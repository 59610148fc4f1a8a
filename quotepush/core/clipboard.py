import logging
from typing import Callable

import pyperclip

from quotepush.core.formatting import format_clipboard_text
from quotepush.core.state import QuoteState
from quotepush.core.status import Toaster

COPIED_TOAST = "Quote copied to clipboard!"
COPY_FAILED_TOAST = "Failed to copy quote to clipboard"

logger = logging.getLogger(__name__)


class ClipboardPublisher:
    def __init__(
        self,
        state: QuoteState,
        toaster: Toaster,
        copy: Callable[[str], None] = pyperclip.copy,
    ) -> None:
        self.state = state
        self.toaster = toaster
        self._copy = copy

    def copy_quote(self) -> bool:
        text = format_clipboard_text(self.state.get())
        try:
            self._copy(text)
        except (pyperclip.PyperclipException, OSError, ValueError) as exc:
            logger.error("Failed to copy: %s", exc)
            self.toaster.show(COPY_FAILED_TOAST)
            return False

        self.toaster.show(COPIED_TOAST)
        return True
