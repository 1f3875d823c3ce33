import logging
import time
from typing import Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from snake_validator import __version__, settings
from snake_validator.engine import validate_ticks
from snake_validator.factory import initialize_game
from snake_validator.models import GameState, Outcome

logger = logging.getLogger(__name__)

OUTCOME_STATUS: Dict[Outcome, int] = {
    Outcome.CONTINUE: status.HTTP_200_OK,
    Outcome.INVALID_MOVE: status.HTTP_400_BAD_REQUEST,
    Outcome.TERMINAL: status.HTTP_418_IM_A_TEAPOT,
}

app = FastAPI(
    title="Snake Validator API",
    version=__version__,
    description="Stateless referee for a grid snake game. Clients start a game with /new and submit batches of ticks to /validate.",
)

# The game state lives in the browser, so any origin may call the API.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        '"%s %s" %d in %.2fms',
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    logger.debug("Rejected body for %s: %s", request.url.path, exc.errors())
    return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)


def parse_dimension(value: Optional[str]) -> int:
    """Parse a board dimension query value; missing or non-numeric counts as 0."""
    if not value:
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


@app.get("/new")
def new_game(w: Optional[str] = None, h: Optional[str] = None):
    width = parse_dimension(w)
    height = parse_dimension(h)
    if width <= 0 or height <= 0:
        return PlainTextResponse("Invalid width or height", status_code=status.HTTP_400_BAD_REQUEST)

    state = initialize_game(width, height)
    return JSONResponse(state.to_payload())


@app.post("/validate")
def validate(state: GameState) -> JSONResponse:
    result, outcome = validate_ticks(state, strict=settings.STRICT_TICKS)
    return JSONResponse(result.to_payload(), status_code=OUTCOME_STATUS[outcome])
