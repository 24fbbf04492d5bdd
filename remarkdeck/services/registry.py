import uuid
from typing import Dict

from remarkdeck.models import Deck


class DeckRegistry:
    """Deck caricati, tenuti in memoria per la durata del processo."""

    def __init__(self):
        self._decks: Dict[str, Deck] = {}

    def add(self, deck: Deck) -> str:
        deck_id = uuid.uuid4().hex[:12]
        self._decks[deck_id] = deck
        return deck_id

    def get(self, deck_id: str) -> Deck:
        return self._decks[deck_id]

    def remove(self, deck_id: str) -> Deck:
        return self._decks.pop(deck_id)

    def __contains__(self, deck_id: str) -> bool:
        return deck_id in self._decks

    def __len__(self) -> int:
        return len(self._decks)
