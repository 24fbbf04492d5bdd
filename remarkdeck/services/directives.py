"""
Direttive di layout delle slide (es. 'class: center, middle').
Le direttive assenti vengono ereditate dalla slide precedente.
"""

import re
from itertools import accumulate
from typing import Dict, List, Tuple

DIRECTIVE_RE = re.compile(r'^([A-Za-z][\w-]*):(\s.*)?$')

# Chiavi che descrivono la singola slide e non vengono ereditate
NON_INHERITED_KEYS = {"name", "count"}


class DirectiveService:
    def extract(self, text: str) -> Tuple[Dict[str, str], str]:
        """
        Estrae le direttive dalle prime righe della slide.
        Ritorna (direttive, contenuto rimanente). Le chiavi sono in minuscolo.
        """
        lines = text.split('\n')
        i = 0
        while i < len(lines) and not lines[i].strip():
            i += 1

        directives = {}
        while i < len(lines):
            match = DIRECTIVE_RE.match(lines[i])
            if not match:
                break
            directives[match.group(1).lower()] = (match.group(2) or "").strip()
            i += 1

        if not directives:
            return {}, text
        return directives, "\n".join(lines[i:])

    def _merge(self, inherited: Dict[str, str], own: Dict[str, str]) -> Dict[str, str]:
        base = {k: v for k, v in inherited.items() if k not in NON_INHERITED_KEYS}
        return {**base, **own}

    def resolve(self, own_directives: List[Dict[str, str]]) -> List[Dict[str, str]]:
        """Risolve le direttive di ogni slide con un fold da sinistra."""
        resolved = accumulate(own_directives, self._merge, initial={})
        return list(resolved)[1:]

    def number_slides(self, own_directives: List[Dict[str, str]]) -> List[int]:
        """Numerazione visibile: le slide con 'count: false' non incrementano il contatore."""
        numbers = []
        counter = 0
        for own in own_directives:
            if own.get("count", "").lower() != "false":
                counter += 1
            numbers.append(counter)
        return numbers
