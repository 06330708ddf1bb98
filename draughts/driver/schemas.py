from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field


class SquareModel(BaseModel):
    col: int = Field(..., ge=0, le=7)
    row: int = Field(..., ge=0, le=7)
    notation: str = Field(..., pattern=r"^[A-H][1-8]$")


class MoveModel(BaseModel):
    origin: SquareModel
    destination: SquareModel
    direction: Literal["up_left", "up_right", "down_left", "down_right"]
    steps: int = Field(..., ge=1, le=2)
    jumped: Optional[SquareModel] = None


class PieceCountModel(BaseModel):
    men: int = Field(..., ge=0)
    kings: int = Field(..., ge=0)
    captured: int = Field(..., ge=0)


class PieceCountsModel(BaseModel):
    white: PieceCountModel
    black: PieceCountModel


class RecordModel(BaseModel):
    player: Literal["white", "black"]
    move: MoveModel
    promoted: bool = False
    continues: bool = False


class GameSnapshot(BaseModel):
    turn: Literal["white", "black"]
    winner: Optional[Literal["white", "black"]] = None
    rows: list[str] = Field(..., min_length=8, max_length=8, description="Top rank first.")
    pieceCounts: PieceCountsModel
    forcedJumps: list[str] = Field(default_factory=list)
    mandatoryCapture: bool = False
    validMoves: list[MoveModel] = Field(default_factory=list)
    moveCount: int = Field(0, ge=0)
    lastMove: Optional[RecordModel] = None
    log: list[str] = Field(default_factory=list)
