"""Official WCA event identifiers and their puzzle metadata."""

from __future__ import annotations

from enum import Enum
from typing import List

from .attempt_result import AttemptResult
from .errors import InvalidEventIdError

__all__ = ["PuzzleType", "OfficialEventId"]


class PuzzleType(Enum):
    CUBE_333 = "333"
    CUBE_222 = "222"
    CUBE_444 = "444"
    CUBE_555 = "555"
    CUBE_666 = "666"
    CUBE_777 = "777"
    CLOCK = "clock"
    MEGAMINX = "minx"
    PYRAMINX = "pyram"
    SKEWB = "skewb"
    SQUARE_1 = "sq1"
    MAGIC = "magic"
    MASTER_MAGIC = "mmagic"


class OfficialEventId(Enum):
    """Event identifiers in canonical WCA order.

    Members compare by that order, so sorting a list of events yields the
    order used on the WCA website.
    """

    CUBE_333 = "333"
    CUBE_222 = "222"
    CUBE_444 = "444"
    CUBE_555 = "555"
    CUBE_666 = "666"
    CUBE_777 = "777"
    BLIND_333 = "333bf"
    FEWEST_MOVES_333 = "333fm"
    ONE_HANDED_333 = "333oh"
    CLOCK = "clock"
    MEGAMINX = "minx"
    PYRAMINX = "pyram"
    SKEWB = "skewb"
    SQUARE_1 = "sq1"
    BLIND_444 = "444bf"
    BLIND_555 = "555bf"
    MULTI_BLIND_333 = "333mbf"
    # Retired events, still found in historical data.
    FEET_333 = "333ft"
    MAGIC = "magic"
    MASTER_MAGIC = "mmagic"
    MULTI_BLIND_OLD_STYLE_333 = "333mbo"

    @classmethod
    def parse(cls, text: str) -> OfficialEventId:
        try:
            return cls(text)
        except ValueError:
            raise InvalidEventIdError(f"Not a valid event: {text!r}") from None

    @classmethod
    def all(cls) -> List[OfficialEventId]:
        return list(cls)

    @classmethod
    def all_official(cls) -> List[OfficialEventId]:
        return [event for event in cls if event.is_official]

    @property
    def ordinal(self) -> int:
        return _ORDINALS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OfficialEventId):
            return NotImplemented
        return self.ordinal < other.ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, OfficialEventId):
            return NotImplemented
        return self.ordinal <= other.ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, OfficialEventId):
            return NotImplemented
        return self.ordinal > other.ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, OfficialEventId):
            return NotImplemented
        return self.ordinal >= other.ordinal

    def __str__(self) -> str:
        return self.value

    @property
    def is_official(self) -> bool:
        return self not in _RETIRED

    @property
    def official_name(self) -> str:
        return _NAMES[self]

    @property
    def has_average(self) -> bool:
        return self not in _MEAN_EVENTS and not self.is_multi_blind

    @property
    def has_mean(self) -> bool:
        return self in _MEAN_EVENTS

    @property
    def has_average_or_mean(self) -> bool:
        return not self.is_multi_blind

    @property
    def is_blind(self) -> bool:
        return self in {
            OfficialEventId.BLIND_333,
            OfficialEventId.BLIND_444,
            OfficialEventId.BLIND_555,
            OfficialEventId.MULTI_BLIND_333,
            OfficialEventId.MULTI_BLIND_OLD_STYLE_333,
        }

    @property
    def is_multi_blind(self) -> bool:
        return self in {
            OfficialEventId.MULTI_BLIND_333,
            OfficialEventId.MULTI_BLIND_OLD_STYLE_333,
        }

    @property
    def puzzle_type(self) -> PuzzleType:
        return _PUZZLES[self]

    def result_view(self, result: AttemptResult) -> AttemptResult:
        """Re-type a decoded centisecond result to this event's scoring unit."""

        if self is OfficialEventId.FEWEST_MOVES_333:
            return result.to_move_count()
        if self.is_multi_blind:
            return result.to_multi_blind()
        return result


_ORDINALS = {event: index for index, event in enumerate(OfficialEventId)}

_RETIRED = {
    OfficialEventId.FEET_333,
    OfficialEventId.MAGIC,
    OfficialEventId.MASTER_MAGIC,
    OfficialEventId.MULTI_BLIND_OLD_STYLE_333,
}

_MEAN_EVENTS = {
    OfficialEventId.CUBE_666,
    OfficialEventId.CUBE_777,
    OfficialEventId.BLIND_333,
    OfficialEventId.BLIND_444,
    OfficialEventId.BLIND_555,
    OfficialEventId.FEWEST_MOVES_333,
}

_NAMES = {
    OfficialEventId.CUBE_333: "3x3x3 Cube",
    OfficialEventId.CUBE_222: "2x2x2 Cube",
    OfficialEventId.CUBE_444: "4x4x4 Cube",
    OfficialEventId.CUBE_555: "5x5x5 Cube",
    OfficialEventId.CUBE_666: "6x6x6 Cube",
    OfficialEventId.CUBE_777: "7x7x7 Cube",
    OfficialEventId.BLIND_333: "3x3x3 Blindfolded",
    OfficialEventId.FEWEST_MOVES_333: "3x3x3 Fewest Moves",
    OfficialEventId.ONE_HANDED_333: "3x3x3 One-Handed",
    OfficialEventId.CLOCK: "Clock",
    OfficialEventId.MEGAMINX: "Megaminx",
    OfficialEventId.PYRAMINX: "Pyraminx",
    OfficialEventId.SKEWB: "Skewb",
    OfficialEventId.SQUARE_1: "Square-1",
    OfficialEventId.BLIND_444: "4x4x4 Blindfolded",
    OfficialEventId.BLIND_555: "5x5x5 Blindfolded",
    OfficialEventId.MULTI_BLIND_333: "3x3x3 Multi-Blind",
    OfficialEventId.FEET_333: "3x3x3 With Feet",
    OfficialEventId.MAGIC: "Magic",
    OfficialEventId.MASTER_MAGIC: "Master Magic",
    OfficialEventId.MULTI_BLIND_OLD_STYLE_333: "3x3x3 Multi-Blind",
}

_PUZZLES = {
    OfficialEventId.CUBE_333: PuzzleType.CUBE_333,
    OfficialEventId.ONE_HANDED_333: PuzzleType.CUBE_333,
    OfficialEventId.BLIND_333: PuzzleType.CUBE_333,
    OfficialEventId.FEET_333: PuzzleType.CUBE_333,
    OfficialEventId.FEWEST_MOVES_333: PuzzleType.CUBE_333,
    OfficialEventId.MULTI_BLIND_333: PuzzleType.CUBE_333,
    OfficialEventId.MULTI_BLIND_OLD_STYLE_333: PuzzleType.CUBE_333,
    OfficialEventId.CUBE_222: PuzzleType.CUBE_222,
    OfficialEventId.CUBE_444: PuzzleType.CUBE_444,
    OfficialEventId.BLIND_444: PuzzleType.CUBE_444,
    OfficialEventId.CUBE_555: PuzzleType.CUBE_555,
    OfficialEventId.BLIND_555: PuzzleType.CUBE_555,
    OfficialEventId.CUBE_666: PuzzleType.CUBE_666,
    OfficialEventId.CUBE_777: PuzzleType.CUBE_777,
    OfficialEventId.CLOCK: PuzzleType.CLOCK,
    OfficialEventId.MEGAMINX: PuzzleType.MEGAMINX,
    OfficialEventId.PYRAMINX: PuzzleType.PYRAMINX,
    OfficialEventId.SKEWB: PuzzleType.SKEWB,
    OfficialEventId.SQUARE_1: PuzzleType.SQUARE_1,
    OfficialEventId.MAGIC: PuzzleType.MAGIC,
    OfficialEventId.MASTER_MAGIC: PuzzleType.MASTER_MAGIC,
}
