from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr, field_validator


class Outcome(str, Enum):
    CONTINUE = "continue"
    INVALID_MOVE = "invalid_move"
    TERMINAL = "terminal"


# Strict scalars: "5", 5.0 and true are not accepted where an int is expected.
class Position(BaseModel):
    x: StrictInt = 0
    y: StrictInt = 0


class Tick(BaseModel):
    velX: StrictInt = 0
    velY: StrictInt = 0


class Snake(BaseModel):
    """Single-segment snake: head cell plus current velocity."""

    x: StrictInt = 0
    y: StrictInt = 0
    velX: StrictInt = 0
    velY: StrictInt = 0

    @property
    def head(self) -> Position:
        return Position(x=self.x, y=self.y)

    def moved_by(self, tick: Tick) -> "Snake":
        """Return the snake after one step with the tick's velocity."""
        return Snake(
            x=self.x + tick.velX,
            y=self.y + tick.velY,
            velX=tick.velX,
            velY=tick.velY,
        )


class GameState(BaseModel):
    gameId: StrictStr = ""
    width: StrictInt = 0
    height: StrictInt = 0
    score: StrictInt = 0
    fruit: Position = Field(default_factory=Position)
    snake: Snake = Field(default_factory=Snake)
    ticks: Optional[List[Tick]] = Field(default_factory=list)

    @field_validator("ticks", mode="before")
    @classmethod
    def null_ticks_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict; `ticks` is left out when there are none."""
        payload = self.model_dump()
        if not payload["ticks"]:
            payload.pop("ticks")
        return payload
