"""Dataclasses for decoded trainers, party creatures and decode results."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pkmsave.save.detect import Generation
from pkmsave.save.tables import NO_MOVE
from pkmsave.save.text import count_bits


@dataclass(frozen=True, slots=True)
class Creature:
    """A single party member."""
    species_id: int
    nickname: str
    level: int
    current_hp: int
    max_hp: int
    attack: int
    defense: int
    speed: int
    special_attack: int
    special_defense: int
    moves: tuple[str, str, str, str]
    move_pp: tuple[int, int, int, int]
    # base PP per slot; None where the move id has no known maximum
    move_max_pp: tuple[Optional[int], ...] = (None, None, None, None)

    def known_moves(self) -> list[tuple[str, int, Optional[int]]]:
        """Filled move slots as (name, pp, max_pp), skipping empty slots."""
        return [
            (move, pp, max_pp)
            for move, pp, max_pp in zip(self.moves, self.move_pp, self.move_max_pp)
            if move and move != NO_MOVE
        ]


@dataclass(frozen=True, slots=True)
class TrainerRecord:
    """Everything decoded from one save file."""
    name: str
    money: int
    badges: int                 # bit-field, one bit per badge
    play_time: int              # seconds
    generation: Generation
    party: tuple[Creature, ...] = ()
    rival_name: Optional[str] = None
    pokedex_owned: Optional[int] = None
    pokedex_seen: Optional[int] = None

    @property
    def party_count(self) -> int:
        return len(self.party)

    @property
    def badge_count(self) -> int:
        return count_bits(self.badges)

    @property
    def play_time_formatted(self) -> str:
        hours, rest = divmod(self.play_time, 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours}:{minutes:02d}:{seconds:02d}"


class DecodeStatus(Enum):
    DECODED = "decoded"                     # every field read from the save
    HEURISTIC = "heuristic"                 # party located by scan, stats synthesized
    FABRICATED = "fabricated"               # nothing located, sample party returned
    SIZE_MISMATCH = "size_mismatch"
    UNKNOWN_GENERATION = "unknown_generation"

    @property
    def ok(self) -> bool:
        return self in (DecodeStatus.DECODED, DecodeStatus.HEURISTIC, DecodeStatus.FABRICATED)


class SaveFormatError(ValueError):
    """Raised when a decode result carries no record."""

    def __init__(self, status: DecodeStatus, message: str):
        super().__init__(message)
        self.status = status


@dataclass(frozen=True)
class DecodeResult:
    """Outcome of a decode: a record, or the reason there is none."""
    status: DecodeStatus
    record: Optional[TrainerRecord] = None
    size: int = 0
    message: str = ""
    warnings: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status.ok and self.record is not None

    @property
    def generation(self) -> Generation:
        return self.record.generation if self.record else Generation.UNKNOWN

    def unwrap(self, strict: bool = False) -> TrainerRecord:
        """Return the record, raising SaveFormatError when there is none.

        With strict=True a fabricated sample party is also rejected.
        """
        if not self.ok:
            raise SaveFormatError(self.status, self.message or self.status.value)
        if strict and self.status is DecodeStatus.FABRICATED:
            raise SaveFormatError(
                self.status,
                "Save format not confidently recognized: no party data found",
            )
        return self.record  # type: ignore[return-value]
