"""
Eccezioni del parser di slide.

Entrambi gli errori sono irrecuperabili a livello di parser e vengono
propagati al chiamante; nessun deck parziale viene prodotto.
"""

from typing import Optional


class DeckError(Exception):
    """Base per tutti gli errori di parsing del deck."""


class MalformedDeckError(DeckError):
    """
    Raised when the source produces no slides.

    Attributes:
        reason: Description of why the deck is malformed
    """

    def __init__(self, reason: str = ""):
        self.reason = reason
        message = "Malformed slide deck"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class UnterminatedBlockError(DeckError):
    """
    Raised when a fenced code block is opened but never closed.

    Attributes:
        line_number: Line (1-based) where the fence was opened
        fence: The opening fence marker (e.g. ``` or ~~~~)
        slide_index: Index of the slide that contains the fence (optional)
    """

    def __init__(self, line_number: int, fence: str = "```", slide_index: Optional[int] = None):
        self.line_number = line_number
        self.fence = fence
        self.slide_index = slide_index
        message = f"Unterminated code block '{fence}' opened at line {line_number}"
        if slide_index is not None:
            message += f" (slide {slide_index})"
        super().__init__(message)
