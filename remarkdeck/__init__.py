from remarkdeck.errors import DeckError, MalformedDeckError, UnterminatedBlockError
from remarkdeck.models import Deck, Slide
from remarkdeck.services.loader import DeckLoader
from remarkdeck.services.parser import DeckParser, parse_deck

__all__ = [
    "Deck",
    "DeckError",
    "DeckLoader",
    "DeckParser",
    "MalformedDeckError",
    "Slide",
    "UnterminatedBlockError",
    "parse_deck",
]
