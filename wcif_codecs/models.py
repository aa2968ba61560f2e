"""WCIF records that embed attempt results, round ids and assignment codes.

Each record converts from and to the camelCase JSON mapping used by WCIF.
Keys whose value is ``None`` are omitted on output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from .activity_code import RoundId
from .attempt_result import AttemptResult, CentiSeconds, decode_attempt_result
from .errors import FieldDecodeError, InvalidFormatError
from .fields import (
    decode_field,
    decode_integer,
    decode_optional_field,
    decode_string,
    decode_string_field,
    require,
)
from .identifiers import AssignmentCode


class ResultType(Enum):
    SINGLE = "single"
    AVERAGE = "average"


class RoundFormat(Enum):
    BEST_OF_1 = "1"
    BEST_OF_2 = "2"
    BEST_OF_3 = "3"
    AVERAGE_OF_5 = "a"
    MEAN_OF_3 = "m"

    @classmethod
    def parse(cls, text: str) -> RoundFormat:
        try:
            return cls(text)
        except ValueError:
            raise InvalidFormatError(f"Unknown round format {text!r}") from None

    @property
    def expected_solve_count(self) -> int:
        return {
            RoundFormat.BEST_OF_1: 1,
            RoundFormat.BEST_OF_2: 2,
            RoundFormat.BEST_OF_3: 3,
            RoundFormat.AVERAGE_OF_5: 5,
            RoundFormat.MEAN_OF_3: 3,
        }[self]

    @property
    def sort_by(self) -> ResultType:
        if self in {RoundFormat.AVERAGE_OF_5, RoundFormat.MEAN_OF_3}:
            return ResultType.AVERAGE
        return ResultType.SINGLE


def _drop_none(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def _require_list(data: Mapping[str, Any], name: str) -> List[Any]:
    value = require(data, name)
    if not isinstance(value, list):
        raise FieldDecodeError(name, InvalidFormatError("expected a list"))
    return value


@dataclass
class Attempt:
    result: AttemptResult[CentiSeconds]
    reconstruction: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Attempt:
        return cls(
            result=decode_field("result", require(data, "result"), decode_attempt_result),
            reconstruction=decode_optional_field(data, "reconstruction", decode_string),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {"result": self.result.encode(), "reconstruction": self.reconstruction}
        )


@dataclass
class RoundResult:
    person_id: int
    best: AttemptResult[CentiSeconds]
    average: AttemptResult[CentiSeconds]
    ranking: Optional[int] = None
    attempts: List[Attempt] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RoundResult:
        raw_attempts = _require_list(data, "attempts")
        return cls(
            person_id=decode_field("personId", require(data, "personId"), decode_integer),
            ranking=decode_optional_field(data, "ranking", decode_integer),
            attempts=[decode_field("attempts", item, Attempt.from_dict) for item in raw_attempts],
            best=decode_field("best", require(data, "best"), decode_attempt_result),
            average=decode_field("average", require(data, "average"), decode_attempt_result),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "personId": self.person_id,
                "ranking": self.ranking,
                "attempts": [attempt.to_dict() for attempt in self.attempts],
                "best": self.best.encode(),
                "average": self.average.encode(),
            }
        )


@dataclass
class Assignment:
    activity_id: int
    assignment_code: AssignmentCode
    station_number: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Assignment:
        return cls(
            activity_id=decode_field("activityId", require(data, "activityId"), decode_integer),
            assignment_code=decode_string_field(
                "assignmentCode", require(data, "assignmentCode"), AssignmentCode.parse
            ),
            station_number=decode_optional_field(data, "stationNumber", decode_integer),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _drop_none(
            {
                "activityId": self.activity_id,
                "assignmentCode": str(self.assignment_code),
                "stationNumber": self.station_number,
            }
        )


@dataclass
class Cutoff:
    number_of_attempts: int
    attempt_result: AttemptResult[CentiSeconds]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Cutoff:
        return cls(
            number_of_attempts=decode_field(
                "numberOfAttempts", require(data, "numberOfAttempts"), decode_integer
            ),
            attempt_result=decode_field(
                "attemptResult", require(data, "attemptResult"), decode_attempt_result
            ),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "numberOfAttempts": self.number_of_attempts,
            "attemptResult": self.attempt_result.encode(),
        }


@dataclass
class TimeLimit:
    centiseconds: int
    cumulative_round_ids: List[RoundId] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TimeLimit:
        raw_ids = _require_list(data, "cumulativeRoundIds")
        return cls(
            centiseconds=decode_field("centiseconds", require(data, "centiseconds"), decode_integer),
            cumulative_round_ids=[
                decode_string_field("cumulativeRoundIds", item, RoundId.parse)
                for item in raw_ids
            ],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "centiseconds": self.centiseconds,
            "cumulativeRoundIds": [str(round_id) for round_id in self.cumulative_round_ids],
        }
