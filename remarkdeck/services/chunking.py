import re
from typing import List, Optional, Tuple

from remarkdeck.errors import UnterminatedBlockError

SLIDE_SEPARATOR = "---"
STEP_SEPARATOR = "--"
NOTES_SEPARATOR = "???"

FENCE_OPEN_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})')
FENCE_CLOSE_RE = re.compile(r'^ {0,3}(`{3,}|~{3,})\s*$')
HEADING_RE = re.compile(r'^ {0,3}#{1,6}\s+(.+?)(?:\s+#+)?\s*$')


class FenceState:
    """
    Tiene traccia dei blocchi di codice (``` o ~~~) durante la scansione.
    Una riga dentro un blocco non e' mai un separatore.
    """

    def __init__(self):
        self.marker: Optional[str] = None
        self.opened_at = 0

    @property
    def is_open(self) -> bool:
        return self.marker is not None

    def feed(self, line: str, line_number: int = 0) -> bool:
        """Aggiorna lo stato con una riga. Ritorna True se la riga appartiene a un blocco."""
        if self.marker is None:
            match = FENCE_OPEN_RE.match(line)
            if match:
                self.marker = match.group(1)
                self.opened_at = line_number
                return True
            return False

        # Chiusura: stesso carattere, almeno la stessa lunghezza, max 3 spazi di rientro
        match = FENCE_CLOSE_RE.match(line)
        if match:
            run = match.group(1)
            if run[0] == self.marker[0] and len(run) >= len(self.marker):
                self.marker = None
        return True


class ChunkingService:
    def __init__(self):
        pass

    def chunk_slides(self, markdown_text: str) -> List[str]:
        """
        Divide il sorgente in slide sulle righe '---'.
        Le righe dentro un blocco di codice non vengono mai considerate separatori.
        """
        chunks = []
        current_chunk = []
        fence = FenceState()

        for line_number, line in enumerate(markdown_text.split('\n'), start=1):
            inside = fence.feed(line, line_number)
            if not inside and line == SLIDE_SEPARATOR:
                chunks.append("\n".join(current_chunk))
                current_chunk = []
            else:
                current_chunk.append(line)

        if fence.is_open:
            raise UnterminatedBlockError(fence.opened_at, fence.marker, slide_index=len(chunks))

        chunks.append("\n".join(current_chunk))
        return chunks

    def split_notes(self, text: str) -> Tuple[str, Optional[str]]:
        """Separa il corpo della slide dalle note del presentatore (dopo '???')."""
        lines = text.split('\n')
        fence = FenceState()
        for i, line in enumerate(lines):
            if not fence.feed(line) and line.strip() == NOTES_SEPARATOR:
                return "\n".join(lines[:i]), "\n".join(lines[i + 1:]).strip()
        return text, None

    def split_steps(self, text: str) -> List[str]:
        """
        Slide incrementali: ogni '--' aggiunge un passo che contiene
        tutto il contenuto precedente.
        """
        parts = []
        current_part = []
        fence = FenceState()
        for line in text.split('\n'):
            if not fence.feed(line) and line.strip() == STEP_SEPARATOR:
                parts.append(current_part)
                current_part = []
            else:
                current_part.append(line)
        parts.append(current_part)

        steps = []
        accumulated = []
        for part in parts:
            accumulated.extend(part)
            steps.append("\n".join(accumulated))
        return steps

    def find_heading(self, text: str) -> Optional[str]:
        fence = FenceState()
        for line in text.split('\n'):
            if fence.feed(line):
                continue
            match = HEADING_RE.match(line)
            if match:
                return match.group(1)
        return None
