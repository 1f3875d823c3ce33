"""Replay of client-proposed ticks against the last authoritative state.

A batch is atomic: either every tick is legal and keeps the snake on the
board, or the state the batch started from is handed back unchanged.
"""

import logging
import random
from typing import Optional, Tuple

from snake_validator.factory import random_position
from snake_validator.models import GameState, Outcome, Snake, Tick

logger = logging.getLogger(__name__)


def is_valid_move(current: Snake, candidate: Snake) -> bool:
    """False only for a straight 180 degree reversal of the current heading.

    Turns, jumps and diagonal steps all pass. A moving snake may not stop,
    since a stop followed by the opposite heading is a reversal in two ticks.
    Only a snake that is already stationary can go anywhere.
    """
    if current.velX == 0 and current.velY == 0:
        return True
    if candidate.velX == 0 and candidate.velY == 0:
        return False
    return not (candidate.velX == -current.velX and candidate.velY == -current.velY)


def is_unit_step(tick: Tick) -> bool:
    return abs(tick.velX) + abs(tick.velY) == 1


def is_game_over(state: GameState) -> bool:
    snake = state.snake
    return snake.x < 0 or snake.y < 0 or snake.x >= state.width or snake.y >= state.height


def is_fruit_eaten(state: GameState) -> bool:
    return state.snake.head == state.fruit


def validate_ticks(
    state: GameState,
    strict: bool = False,
    rng: Optional[random.Random] = None,
) -> Tuple[GameState, Outcome]:
    """Replay ``state.ticks`` and classify the result.

    Returns the advanced state with ``Outcome.CONTINUE`` when the whole batch
    applies. On an illegal tick (``INVALID_MOVE``) or a head leaving the board
    (``TERMINAL``) the returned state is the one the batch started from, so
    ticks that were fine before the failing one are dropped as well. A state
    that is already off the board comes back as-is with ``TERMINAL``.

    ``strict`` additionally rejects any tick that is not a single step along
    one axis. The input object is never mutated.
    """
    if is_game_over(state):
        logger.info("%s is already over, ignoring %d ticks", state.gameId, len(state.ticks))
        return state, Outcome.TERMINAL

    baseline = state.model_copy(deep=True)
    if is_fruit_eaten(baseline):
        baseline.score += 1
        baseline.fruit = random_position(baseline.width, baseline.height, rng)
        logger.debug("%s ate fruit, score now %d", baseline.gameId, baseline.score)

    snake = baseline.snake
    for index, tick in enumerate(baseline.ticks):
        candidate = snake.moved_by(tick)

        if not is_valid_move(snake, candidate) or (strict and not is_unit_step(tick)):
            logger.info(
                "%s rejected tick %d (%d, %d) while moving (%d, %d)",
                baseline.gameId, index, tick.velX, tick.velY, snake.velX, snake.velY,
            )
            return baseline, Outcome.INVALID_MOVE

        snake = candidate

        if is_game_over(baseline.model_copy(update={"snake": snake})):
            logger.info("%s left the board at (%d, %d) on tick %d", baseline.gameId, snake.x, snake.y, index)
            return baseline, Outcome.TERMINAL

    result = baseline.model_copy(deep=True, update={"snake": snake, "ticks": []})
    logger.debug("%s advanced to (%d, %d)", result.gameId, snake.x, snake.y)
    return result, Outcome.CONTINUE
