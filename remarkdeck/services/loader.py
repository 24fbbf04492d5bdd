"""
Caricamento dei deck da file markdown o dalla pagina HTML originale
(il sorgente delle slide sta nella <textarea id="source">).
"""

import os
import logging
from typing import Optional
from bs4 import BeautifulSoup

from remarkdeck.errors import MalformedDeckError
from remarkdeck.models import Deck
from remarkdeck.services.parser import DeckParser

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = ('.html', '.htm')


class DeckLoader:
    def __init__(self, parser: Optional[DeckParser] = None):
        self.parser = parser or DeckParser()

    def load(self, path: str) -> Deck:
        """Carica un deck scegliendo il formato in base all'estensione."""
        if path.lower().endswith(HTML_EXTENSIONS):
            return self.load_html(path)
        return self.load_markdown(path)

    def load_markdown(self, path: str) -> Deck:
        """Carica un deck da file markdown."""
        with open(path, 'r', encoding='utf-8') as f:
            source = f.read()
        logger.info(f"Loaded markdown source {path} ({len(source)} chars)")
        return self.load_from_content(source)

    def load_from_content(self, source: str) -> Deck:
        """Carica un deck da stringa markdown."""
        return self.parser.parse(source)

    def load_html(self, path: str) -> Deck:
        """Carica un deck dalla textarea di una pagina HTML."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"HTML file not found: {path}")
        with open(path, 'r', encoding='utf-8') as f:
            html = f.read()
        logger.info(f"Loaded HTML page {path} ({len(html)} chars)")
        return self.load_html_from_content(html)

    def load_html_from_content(self, html: str) -> Deck:
        return self.load_from_content(self.extract_source(html))

    def extract_source(self, html: str) -> str:
        # html5lib tratta il contenuto della textarea come testo (es. List<String>)
        soup = BeautifulSoup(html, 'html5lib')
        textarea = soup.find('textarea', id='source') or soup.find('textarea')
        if textarea is None:
            raise MalformedDeckError("no <textarea> with slide source found in HTML")
        return textarea.get_text()
