from typing import List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class GameScoreOut(BaseModel):
    """Normalized rolls of a game alongside its total.

    Strikes are rendered as ``"X"``; every other roll as the pins it knocked
    down (a spare as its remaining pin count).
    """

    rolls: List[Union[int, Literal["X"]]] = Field(default_factory=list)
    total: int = Field(..., ge=0)

    model_config = ConfigDict(extra="forbid")
