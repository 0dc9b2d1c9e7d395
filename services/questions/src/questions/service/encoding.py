"""Content encoding for the generation payload."""
import base64


def encode_content(text: str) -> str:
    """Base64 of text where every code point must fit in one byte.

    Raises UnicodeEncodeError for code points above U+00FF.
    """
    return base64.b64encode(text.encode("latin-1")).decode("ascii")


def join_batch(batch: list[str], separator: str = ",") -> str:
    return separator.join(batch)
