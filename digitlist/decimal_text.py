"""
Decimal text ingestion and rendering.

The strict parser raises on malformed input; the lenient helpers used by the
text constructors of DigitList return None instead.
"""

import os

import regex as re

from digitlist.constants import DECIMAL_PATTERN
from digitlist.logging_config import get_logger

logger = get_logger(__name__)

_DECIMAL_RE = re.compile(DECIMAL_PATTERN)


def is_decimal(text: str) -> bool:
    """True when `text` consists of ASCII decimal digits only (at least one)."""
    return _DECIMAL_RE.fullmatch(text) is not None


def parse_decimal_strict(text: str) -> int:
    """
    Parse a non-negative decimal integer.

    Args:
        text: Decimal digits, no sign and no surrounding whitespace.

    Returns:
        The parsed value.

    Raises:
        ValueError: If `text` is None or not made of decimal digits only.
    """
    if text is None or not is_decimal(text):
        raise ValueError(f"Invalid decimal number: {text!r}")
    return int(text, 10)


def parse_decimal_lenient(text: str | None) -> int | None:
    """Trim and parse `text`, returning None when it is absent or not a decimal number."""
    stripped = "" if text is None else text.strip()
    if not stripped or not is_decimal(stripped):
        logger.debug(f"Ignoring non-decimal input {text!r}")
        return None
    return int(stripped, 10)


def read_decimal_file(path: str | os.PathLike | None) -> int | None:
    """Read a decimal number from a UTF-8 file, returning None if the file is unusable."""
    if path is None:
        return None
    if not os.path.isfile(path):
        logger.warning(f"Decimal source {path} does not exist or is not a file")
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read decimal source {path}: {e}")
        return None
    return parse_decimal_lenient(text)


def render_decimal(value: int) -> str:
    """Render a non-negative integer in base 10."""
    if value < 0:
        raise ValueError("Negative not allowed")
    return str(value)


def write_decimal_file(path: str | os.PathLike, value: int) -> None:
    """Write `value` to `path` as decimal text."""
    if path is None:
        raise ValueError("path must not be None")
    text = render_decimal(value)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError:
        logger.error(f"Cannot write file: {path}")
        raise
