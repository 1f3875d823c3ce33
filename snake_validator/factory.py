import logging
import random
from typing import Optional
from uuid import uuid4

from snake_validator import settings
from snake_validator.models import GameState, Position, Snake

logger = logging.getLogger(__name__)

# SystemRandom draws from the OS, so it is safe to share across requests.
_rng = random.SystemRandom()


def random_position(width: int, height: int, rng: Optional[random.Random] = None) -> Position:
    """Uniformly random cell in [0, width) x [0, height)."""
    source = rng or _rng
    return Position(x=source.randrange(width), y=source.randrange(height))


def generate_game_id() -> str:
    return f"game-{uuid4().hex}"


def initialize_game(width: int, height: int, rng: Optional[random.Random] = None) -> GameState:
    """Build a fresh game for a width x height board.

    Dimensions are expected to be positive; the caller checks them. The fruit
    may land on the snake's spawn cell.
    """
    state = GameState(
        gameId=generate_game_id(),
        width=width,
        height=height,
        score=0,
        fruit=random_position(width, height, rng),
        snake=Snake(
            x=settings.START_X,
            y=settings.START_Y,
            velX=settings.START_VEL_X,
            velY=settings.START_VEL_Y,
        ),
        ticks=[],
    )
    logger.info("Created %s on a %dx%d board", state.gameId, width, height)
    return state
