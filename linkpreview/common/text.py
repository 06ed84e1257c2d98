"""Text clean-up applied to every extracted preview field."""

import unicodedata
import warnings
from typing import Union

from bs4 import BeautifulSoup

# tried in order when the raw value arrives as bytes
ENCODINGS = ('utf-8', 'cp1252', 'latin-1')


def decode_text(raw: Union[str, bytes, None]) -> str:
    """
    Normalize a raw value to a NFC unicode string.

    Bytes are decoded with the first encoding in ``ENCODINGS`` that accepts them.
    Strings are already decoded (the HTML parser resolves the document charset)
    and pass through unchanged apart from the NFC normalization.

    Args:
        raw: Raw field value

    Returns:
        Decoded text, empty string for None
    """
    if raw is None:
        return ''

    if isinstance(raw, bytes):
        for encoding in ENCODINGS:
            try:
                raw = raw.decode(encoding)
                break
            except UnicodeDecodeError:
                continue  # latin-1 never fails

    return unicodedata.normalize('NFC', raw)


def strip_markup(text: str) -> str:
    """Remove script/style blocks, comments and tags, then trim."""
    if not text:
        return ''

    with warnings.catch_warnings():
        warnings.simplefilter('ignore')  # MarkupResemblesLocatorWarning on plain text
        soup = BeautifulSoup(text, 'html.parser')

    for element in soup(['script', 'style']):
        element.decompose()

    return soup.get_text().strip()


def clean_text(raw: Union[str, bytes, None]) -> str:
    return strip_markup(decode_text(raw))
