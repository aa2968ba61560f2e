"""Attempt result codec.

WCIF stores every attempt outcome as one signed integer: ``0`` for a skipped
attempt, ``-1`` for DNF, ``-2`` for DNS and any positive value for a
successful attempt. What a positive value means depends on the event:
centiseconds for timed events, a move count for fewest moves, and a packed
solved/attempted/time triple for multi-blind.

Decoding always yields an ``AttemptResult`` carrying :class:`CentiSeconds`;
callers that know the event re-type it with :meth:`AttemptResult.to_move_count`
or :meth:`AttemptResult.to_multi_blind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, TypeVar

from .errors import InvalidResultError, NotANumberError

SKIPPED_VALUE = 0
DNF_VALUE = -1
DNS_VALUE = -2
MAX_RESULT_VALUE = 2**32 - 1

# Packed multi-blind values at or above this magnitude use the legacy layout.
MULTI_BLIND_OLD_STYLE_THRESHOLD = 1_000_000_000

__all__ = [
    "ResultKind",
    "CentiSeconds",
    "MoveCount",
    "MultiBlindResult",
    "AttemptResult",
    "SKIPPED",
    "DNF",
    "DNS",
    "decode_attempt_result",
    "decode_move_count_result",
    "decode_multi_blind_result",
    "encode_attempt_result",
]


class CentiSeconds(int):
    """Elapsed time in hundredths of a second."""

    __slots__ = ()

    def ranking_key(self) -> int:
        return int(self)

    def display(self) -> str:
        value = int(self)
        cents = value % 100
        if value < 100 * 60:
            return f"{value // 100}.{cents:02d}"
        seconds = (value // 100) % 60
        if value < 100 * 60 * 60:
            return f"{value // 6000}:{seconds:02d}.{cents:02d}"
        minutes = (value // 6000) % 60
        return f"{value // 360000}:{minutes:02d}:{seconds:02d}.{cents:02d}"

    def __repr__(self) -> str:
        return f"CentiSeconds({int(self)})"


class MoveCount(int):
    """Number of moves for fewest-moves attempts.

    Values above 80 are means stored multiplied by 100 and render with two
    decimals.
    """

    __slots__ = ()

    def ranking_key(self) -> int:
        return int(self)

    def display(self) -> str:
        value = int(self)
        if value > 80:
            return f"{value // 100}.{value % 100:02d}"
        return str(value)

    def __repr__(self) -> str:
        return f"MoveCount({int(self)})"


@dataclass(frozen=True)
class MultiBlindResult:
    """Solved/attempted/time triple packed into a multi-blind attempt value.

    ``time`` is expressed in whole seconds. ``old_style`` records which wire
    layout the value was decoded from so that encoding reproduces it.
    """

    attempted: int
    solved: int
    time: int
    old_style: bool = False

    @classmethod
    def from_packed(cls, value: int) -> MultiBlindResult:
        """Unpack a positive wire value using the layout implied by its magnitude."""

        value = int(value)
        if value < MULTI_BLIND_OLD_STYLE_THRESHOLD:
            missed = value % 100
            value //= 100
            time = value % 100_000
            value //= 100_000
            difference = 99 - value
            solved = difference + missed
            return cls(
                attempted=solved + missed,
                solved=solved,
                time=time,
                old_style=False,
            )
        time = value % 100_000
        value //= 100_000
        attempted = value % 100
        value //= 100
        return cls(
            attempted=attempted,
            solved=99 - (value % 100),
            time=time,
            old_style=True,
        )

    @property
    def failed(self) -> int:
        return self.attempted - self.solved

    @property
    def points(self) -> int:
        return self.solved - self.failed

    @property
    def seconds(self) -> int:
        return self.time

    @property
    def is_old_style(self) -> bool:
        return self.old_style

    def encode(self) -> int:
        if self.old_style:
            return (
                MULTI_BLIND_OLD_STYLE_THRESHOLD
                + (99 - self.solved) * 10_000_000
                + self.attempted * 100_000
                + self.time
            )
        return (99 - self.points) * 10_000_000 + self.time * 100 + self.failed

    def __int__(self) -> int:
        return self.encode()

    def ranking_key(self) -> tuple[int, int, int]:
        # More points first, then less time, then fewer failures.
        return (-self.points, self.time, self.failed)

    def display(self) -> str:
        seconds = self.time
        if seconds >= 3600:
            clock = f"{seconds // 3600}:{(seconds % 3600) // 60:02d}:{seconds % 60:02d}"
        else:
            clock = f"{seconds // 60:02d}:{seconds % 60:02d}"
        return f"{self.solved}/{self.attempted} {clock}"


class ResultKind(Enum):
    SKIPPED = "skipped"
    DNF = "dnf"
    DNS = "dns"
    SUCCESS = "success"


def _narrow_move_count(value: int) -> MoveCount:
    # Move counts are stored in 16 bits.
    narrowed = int(value) & 0xFFFF
    if narrowed == 0:
        raise InvalidResultError(f"Not a valid move count: {int(value)}")
    return MoveCount(narrowed)


_KIND_VALUES = {
    ResultKind.SKIPPED: SKIPPED_VALUE,
    ResultKind.DNF: DNF_VALUE,
    ResultKind.DNS: DNS_VALUE,
}

_KIND_DISPLAY = {
    ResultKind.SKIPPED: "",
    ResultKind.DNF: "DNF",
    ResultKind.DNS: "DNS",
}

V = TypeVar("V")
W = TypeVar("W")


@dataclass(frozen=True)
class AttemptResult(Generic[V]):
    """Outcome of one attempt: skipped, DNF, DNS or a successful payload.

    Equality is structural. The comparison operators implement ranking
    instead: ``a > b`` means ``a`` is the better result. Any success beats
    every non-success, and skipped, DNF and DNS rank equally.
    """

    kind: ResultKind
    value: V | None = None

    def __post_init__(self) -> None:
        if (self.kind is ResultKind.SUCCESS) != (self.value is not None):
            raise ValueError("Only successful attempt results carry a value")
        # Plain payloads must survive an encode/decode cycle.
        if isinstance(self.value, int) and not 0 < self.value <= MAX_RESULT_VALUE:
            raise ValueError(
                f"Successful result {int(self.value)} outside 1..{MAX_RESULT_VALUE}"
            )

    @classmethod
    def success(cls, value: V) -> AttemptResult[V]:
        if type(value) is int:
            value = CentiSeconds(value)  # type: ignore[assignment]
        return cls(ResultKind.SUCCESS, value)

    @property
    def is_success(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    def ok(self) -> V | None:
        return self.value if self.is_success else None

    def _map(self, convert: Callable[[V], W]) -> AttemptResult[W]:
        if not self.is_success:
            return AttemptResult(self.kind)
        return AttemptResult(ResultKind.SUCCESS, convert(self.value))  # type: ignore[arg-type]

    def to_multi_blind(self) -> AttemptResult[MultiBlindResult]:
        return self._map(MultiBlindResult.from_packed)  # type: ignore[arg-type]

    def to_move_count(self) -> AttemptResult[MoveCount]:
        return self._map(_narrow_move_count)  # type: ignore[arg-type]

    def encode(self) -> int:
        if self.is_success:
            return int(self.value)  # type: ignore[call-overload]
        return _KIND_VALUES[self.kind]

    @property
    def sort_key(self) -> tuple:
        """Ascending key that orders the best result first."""

        if self.is_success:
            return (0, self.value.ranking_key())  # type: ignore[union-attr]
        return (1,)

    def ranks_equal(self, other: AttemptResult) -> bool:
        return self.sort_key == other.sort_key

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, AttemptResult):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, AttemptResult):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AttemptResult):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __le__(self, other: object) -> bool:
        if not isinstance(other, AttemptResult):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        if self.is_success:
            return self.value.display()  # type: ignore[union-attr]
        return _KIND_DISPLAY[self.kind]


SKIPPED: AttemptResult[Any] = AttemptResult(ResultKind.SKIPPED)
DNF: AttemptResult[Any] = AttemptResult(ResultKind.DNF)
DNS: AttemptResult[Any] = AttemptResult(ResultKind.DNS)


def decode_attempt_result(raw: Any) -> AttemptResult[CentiSeconds]:
    """Decode a wire integer into an attempt result.

    Raises:
        NotANumberError: ``raw`` is not an integer (booleans and floats
            included).
        InvalidResultError: ``raw`` is negative but not a DNF/DNS sentinel,
            or does not fit in 32 unsigned bits.
    """

    if isinstance(raw, bool) or not isinstance(raw, int):
        raise NotANumberError(f"Not a number: {raw!r}")
    if raw == SKIPPED_VALUE:
        return SKIPPED
    if raw == DNF_VALUE:
        return DNF
    if raw == DNS_VALUE:
        return DNS
    if 0 < raw <= MAX_RESULT_VALUE:
        return AttemptResult(ResultKind.SUCCESS, CentiSeconds(raw))
    raise InvalidResultError(f"Not a valid result: {raw}")


def decode_move_count_result(raw: Any) -> AttemptResult[MoveCount]:
    return decode_attempt_result(raw).to_move_count()


def decode_multi_blind_result(raw: Any) -> AttemptResult[MultiBlindResult]:
    return decode_attempt_result(raw).to_multi_blind()


def encode_attempt_result(result: AttemptResult) -> int:
    return result.encode()
