"""Core pieces of quotepush: state, formatting, status, clipboard, publishing, config."""
from .state import EMPTY_QUOTE, PublishForm, Quote, QuoteState
from .formatting import encode_content, format_clipboard_text, format_file_content
from .status import ConsoleView, StatusKind, StatusLine, Toaster
from .clipboard import ClipboardPublisher
from .publisher import GitHubPublisher, validate_form
from .config import load_config

__all__ = [
    "EMPTY_QUOTE",
    "PublishForm",
    "Quote",
    "QuoteState",
    "encode_content",
    "format_clipboard_text",
    "format_file_content",
    "ConsoleView",
    "StatusKind",
    "StatusLine",
    "Toaster",
    "ClipboardPublisher",
    "GitHubPublisher",
    "validate_form",
    "load_config",
]
