"""Identifier-aware tokenizing and greedy line wrapping."""

from typing import Callable, Iterable, List, Optional
from reportlab.pdfbase.pdfmetrics import stringWidth

# measure(text, font_size) -> rendered width in points
Measure = Callable[[str, float], float]

# string_width(text, font_name, font_size), same signature as pdfmetrics.stringWidth
StringWidth = Callable[[str, str, float], float]


def font_measure(font_name: str, string_width: StringWidth = stringWidth) -> Measure:
    """Bind a font name to the measure signature used by the wrapper."""
    def measure(text: str, font_size: float) -> float:
        return string_width(text, font_name, font_size)
    return measure


def split_text_into_tokens(text: Optional[str]) -> List[str]:
    """
    Split text into non-splittable fragments at natural break points.

    Breaks after spaces and underscores (the separator stays with the
    preceding token), and before the second character of a lower/upper,
    letter/digit or digit/letter pair. Joining the tokens gives back
    the original text.

    >>> split_text_into_tokens("userID_42getValue")
    ['user', 'ID_', '42', 'get', 'Value']
    """
    tokens: List[str] = []
    if not text:
        return tokens

    current = ""
    prev = ""
    for ch in text:
        if ch == " " or ch == "_":
            tokens.append(current + ch)
            current = ""
        else:
            if prev and (
                (prev.islower() and ch.isupper())
                or (prev.isalpha() and ch.isdecimal())
                or (prev.isdecimal() and ch.isalpha())
            ):
                if current:
                    tokens.append(current)
                current = ""
            current += ch
        prev = ch

    if current:
        tokens.append(current)
    return tokens


def wrap_tokens(
    tokens: Iterable[str],
    measure: Measure,
    font_size: float,
    max_width: float,
) -> List[str]:
    """Greedily pack tokens into lines no wider than max_width.

    A token wider than max_width on its own is never split; it gets a
    line to itself and overflows.
    """
    lines: List[str] = []
    current = ""

    for token in tokens:
        candidate = current + token
        if current and measure(candidate, font_size) > max_width:
            lines.append(current)
            current = token
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines


def wrap_text(
    text: Optional[str],
    measure: Measure,
    font_size: float,
    max_width: float,
) -> List[str]:
    """Tokenize and wrap text. Empty text gives no lines."""
    if not text:
        return []
    return wrap_tokens(split_text_into_tokens(text), measure, font_size, max_width)
