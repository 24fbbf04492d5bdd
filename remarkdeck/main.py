import os
import logging

from dotenv import load_dotenv

# Load environment variables from .env file BEFORE building the app
load_dotenv()

from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from remarkdeck.errors import DeckError
from remarkdeck.models import Deck
from remarkdeck.services.loader import DeckLoader, HTML_EXTENSIONS
from remarkdeck.services.registry import DeckRegistry

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
MAX_SOURCE_BYTES = int(os.getenv("MAX_SOURCE_BYTES", str(1024 * 1024)))

# Setup Logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

app = FastAPI()

# Allow CORS for the renderer
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

deck_loader = DeckLoader()
deck_registry = DeckRegistry()


class DeckSourceRequest(BaseModel):
    source: str


def _deck_response(deck_id: str, deck: Deck) -> dict:
    return {
        "deck_id": deck_id,
        "length": deck.length,
        "title": deck.title,
        "slides": deck.slides
    }


def _get_deck(deck_id: str) -> Deck:
    try:
        return deck_registry.get(deck_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Deck {deck_id} not found")


def _check_size(size: int):
    if size > MAX_SOURCE_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"Source too large ({size} bytes, max {MAX_SOURCE_BYTES})"
        )


@app.get("/api/health")
def read_root():
    return {"message": "remarkdeck backend is ready"}


@app.post("/decks")
def create_deck(request: DeckSourceRequest):
    """Analizza un sorgente markdown e registra il deck."""
    _check_size(len(request.source.encode("utf-8")))
    try:
        deck = deck_loader.load_from_content(request.source)
    except DeckError as e:
        logger.warning(f"Rejected deck source: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    deck_id = deck_registry.add(deck)
    logger.info(f"Registered deck {deck_id} with {deck.length} slides")
    return _deck_response(deck_id, deck)


@app.post("/decks/upload")
async def upload_deck(source: UploadFile = File(...)):
    """
    Importa un file markdown (.md) o la pagina HTML della presentazione.
    - .html/.htm -> il sorgente viene letto dalla <textarea>
    - altrimenti il file e' trattato come markdown
    """
    logger.info(f"Received upload: {source.filename}")
    data = await source.read(MAX_SOURCE_BYTES + 1)
    _check_size(len(data))

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Source file is not valid UTF-8")

    filename = (source.filename or "").lower()
    try:
        if filename.endswith(HTML_EXTENSIONS):
            deck = deck_loader.load_html_from_content(text)
        else:
            deck = deck_loader.load_from_content(text)
    except DeckError as e:
        logger.warning(f"Rejected upload {source.filename}: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    deck_id = deck_registry.add(deck)
    logger.info(f"Registered deck {deck_id} from {source.filename} ({deck.length} slides)")
    return _deck_response(deck_id, deck)


@app.get("/decks/{deck_id}")
def get_deck(deck_id: str):
    return _deck_response(deck_id, _get_deck(deck_id))


@app.get("/decks/{deck_id}/slides/{index}")
def get_slide(deck_id: str, index: int):
    deck = _get_deck(deck_id)
    if index < 0 or index >= deck.length:
        raise HTTPException(
            status_code=404,
            detail=f"Slide {index} out of range (deck has {deck.length} slides)"
        )
    return deck[index]


@app.delete("/decks/{deck_id}")
def delete_deck(deck_id: str):
    _get_deck(deck_id)
    deck_registry.remove(deck_id)
    logger.info(f"Removed deck {deck_id}")
    return {"message": f"Deck {deck_id} removed"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
