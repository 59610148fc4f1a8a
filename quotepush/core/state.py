from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Quote:
    text: str
    author: str


EMPTY_QUOTE = Quote(text="", author="")


class QuoteState:
    """Holds the quote currently on screen.

    One instance is created by the runner and shared with everything that
    renders, copies or publishes the quote. The quote is only ever replaced,
    never edited in place.
    """

    def __init__(self, quote: Quote = EMPTY_QUOTE) -> None:
        self._quote = quote

    def get(self) -> Quote:
        return self._quote

    def set(self, quote: Quote) -> None:
        self._quote = quote


@dataclass
class PublishForm:
    token: str = ""
    repo: str = ""
    file_path: str = ""
    commit_message: str = ""

    def values(self) -> Tuple[str, str, str, str]:
        """Returns the trimmed (token, repo, file_path, commit_message)."""
        return (
            (self.token or "").strip(),
            (self.repo or "").strip(),
            (self.file_path or "").strip(),
            (self.commit_message or "").strip(),
        )
