"""
Text measurement and word wrapping.

Widths come from the same font metrics the PDF renderer uses, so a wrapped line
never renders wider than the width it was wrapped to.
"""

from typing import Callable, List
from reportlab.pdfbase.pdfmetrics import stringWidth


class TextMeasurer:
    """Measures rendered string widths for the catalog fonts."""

    def __init__(self, regular_font: str = "Helvetica", bold_font: str = "Helvetica-Bold"):
        self.regular_font = regular_font
        self.bold_font = bold_font

    def width(self, text: str, font_size: float, bold: bool = False) -> float:
        font = self.bold_font if bold else self.regular_font
        return stringWidth(text, font, font_size)

    def measure_for(self, font_size: float, bold: bool = False) -> Callable[[str], float]:
        return lambda text: self.width(text, font_size, bold)


def _split_long_word(word: str, max_width: float, measure: Callable[[str], float]) -> List[str]:
    """Break a word that is wider than a line into line-sized pieces."""
    pieces = []
    current = ""
    for char in word:
        if current and measure(current + char) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def wrap_text(text: str, max_width: float, measure: Callable[[str], float]) -> List[str]:
    """
    Greedy word wrap.

    Words are added to the current line until the next one would push it past
    max_width. Explicit newlines start a new paragraph. Words wider than a whole
    line are split between characters.
    """
    lines: List[str] = []

    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue

        current = ""
        for word in words:
            candidate = f"{current} {word}" if current else word
            if measure(candidate) <= max_width:
                current = candidate
                continue

            if current:
                lines.append(current)
            if measure(word) <= max_width:
                current = word
            else:
                pieces = _split_long_word(word, max_width, measure)
                lines.extend(pieces[:-1])
                current = pieces[-1]

        lines.append(current)

    return lines
