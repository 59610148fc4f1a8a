import base64

from quotepush.core.state import Quote


def format_clipboard_text(quote: Quote) -> str:
    return f'"{quote.text}" {quote.author}'


def format_file_content(quote: Quote) -> str:
    return f'"{quote.text}" — {quote.author}\n\n'


def format_author_line(author: str) -> str:
    return f"— {author}"


def encode_content(text: str) -> str:
    """Base64 of the UTF-8 bytes, as the contents API expects."""

    return base64.b64encode(text.encode("utf-8")).decode("ascii")
