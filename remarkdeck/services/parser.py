"""
Parser del deck: testo markdown con separatori '---' -> Deck immutabile.
"""

import logging
from typing import Optional

from remarkdeck.errors import MalformedDeckError
from remarkdeck.models import Deck, Slide
from remarkdeck.services.chunking import ChunkingService
from remarkdeck.services.directives import DirectiveService

logger = logging.getLogger(__name__)


class DeckParser:
    def __init__(
        self,
        chunking_service: Optional[ChunkingService] = None,
        directive_service: Optional[DirectiveService] = None
    ):
        self.chunking = chunking_service or ChunkingService()
        self.directives = directive_service or DirectiveService()

    def parse(self, source: str) -> Deck:
        """
        Algoritmo:
        1. Divide il sorgente sulle righe '---' fuori dai blocchi di codice
        2. Estrae le direttive iniziali, le note ('???') e i passi ('--') di ogni slide
        3. Risolve l'ereditarieta' delle direttive e la numerazione
        """
        if not source or not source.strip():
            raise MalformedDeckError("source is empty")

        source = source.replace('\r\n', '\n')
        chunks = self.chunking.chunk_slides(source)

        if all(not chunk.strip() for chunk in chunks):
            raise MalformedDeckError("no slides found")

        own_directives = []
        bodies = []
        for chunk in chunks:
            directives, body = self.directives.extract(chunk)
            own_directives.append(directives)
            bodies.append(body)

        resolved = self.directives.resolve(own_directives)
        numbers = self.directives.number_slides(own_directives)

        slides = []
        for index, chunk in enumerate(chunks):
            content, notes = self.chunking.split_notes(bodies[index])
            slides.append(Slide(
                index=index,
                number=numbers[index],
                raw_content=chunk,
                content=content,
                notes=notes,
                steps=self.chunking.split_steps(content),
                own_directives=own_directives[index],
                layout_directives=resolved[index]
            ))

        title = None
        for slide in slides:
            title = self.chunking.find_heading(slide.content)
            if title:
                break

        logger.debug(f"[PARSE] {len(slides)} slide, titolo: {title}")
        return Deck(slides=slides, title=title)


_default_parser = DeckParser()


def parse_deck(source: str) -> Deck:
    return _default_parser.parse(source)
