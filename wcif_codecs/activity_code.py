"""Activity code grammar.

Activity codes identify what happens during a scheduled activity::

    activity-code := official | "other-" unofficial
    official      := event ("-r" round)? ("-g" group)? ("-a" attempt)?
    unofficial    := keyword | "misc" ("-" label)? | "unofficial-" official

Official codes carry an :class:`OfficialEventId`; the event of an
``unofficial-`` code is kept as a plain string. Event codes are partially
ordered by specificity: a group is more specific than its round, which is
more specific than the bare event.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar, Union

from . import config
from .errors import (
    DigitParseError,
    InvalidFormatError,
    MissingEventIdError,
    MissingRoundPrefixError,
)
from .event_ids import OfficialEventId

LOGGER = logging.getLogger(__name__)

OTHER_PREFIX = "other-"
UNOFFICIAL_EVENT_PREFIX = "unofficial-"
MISC_KEYWORD = "misc"

MAX_ROUND = 2**32 - 1
MAX_GROUP = 2**32 - 1
MAX_ATTEMPT = 2**8 - 1

_DIGITS = re.compile(r"[0-9]+")

E = TypeVar("E")

__all__ = [
    "EventActivityCode",
    "RoundId",
    "UnofficialKeyword",
    "UnofficialEvent",
    "MiscActivity",
    "OtherActivity",
    "UnofficialActivityCode",
    "ActivityCode",
    "compare_specificity",
    "is_official",
    "parse_activity_code",
    "format_activity_code",
    "parse_unofficial_activity_code",
]


def _parse_unsigned(text: str, maximum: int, what: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise DigitParseError(f"Invalid {what} number {text!r}")
    value = int(text)
    if value > maximum:
        raise DigitParseError(f"{what.capitalize()} number {value} out of range")
    return value


def _check_range(value: Optional[int], maximum: int, what: str) -> None:
    if value is not None and not 0 <= value <= maximum:
        raise ValueError(f"{what.capitalize()} number {value} outside 0..{maximum}")


def _loose_event_id(text: str) -> str:
    return text


@dataclass(frozen=True)
class EventActivityCode(Generic[E]):
    """``event[-r{round}][-g{group}][-a{attempt}]``."""

    event: E
    round: Optional[int] = None
    group: Optional[int] = None
    attempt: Optional[int] = None

    def __post_init__(self) -> None:
        _check_range(self.round, MAX_ROUND, "round")
        _check_range(self.group, MAX_GROUP, "group")
        _check_range(self.attempt, MAX_ATTEMPT, "attempt")

    @classmethod
    def parse(
        cls,
        text: str,
        event_parser: Callable[[str], E] = OfficialEventId.parse,  # type: ignore[assignment]
    ) -> EventActivityCode[E]:
        """Parse an event code, reading each optional part only when its prefix matches.

        Raises:
            MissingEventIdError: the event token is empty.
            DigitParseError: a round, group or attempt number is not a number.
            InvalidFormatError: the token after the group is not an attempt,
                or tokens follow the attempt.
        """

        tokens = text.split("-")
        if not tokens[0]:
            raise MissingEventIdError(f"Missing event id in {text!r}")
        event = event_parser(tokens[0])
        position = 1

        round_id = None
        if position < len(tokens) and tokens[position].startswith("r"):
            round_id = _parse_unsigned(tokens[position][1:], MAX_ROUND, "round")
            position += 1

        group_id = None
        if position < len(tokens) and tokens[position].startswith("g"):
            group_id = _parse_unsigned(tokens[position][1:], MAX_GROUP, "group")
            position += 1

        attempt_id = None
        if position < len(tokens):
            token = tokens[position]
            if not token.startswith("a"):
                raise InvalidFormatError(
                    f"Unexpected token {token!r} in activity code {text!r}"
                )
            attempt_id = _parse_unsigned(token[1:], MAX_ATTEMPT, "attempt")
            position += 1

        if position < len(tokens):
            raise InvalidFormatError(f"Trailing tokens in activity code {text!r}")
        return cls(event=event, round=round_id, group=group_id, attempt=attempt_id)

    @classmethod
    def for_event(cls, event: E) -> EventActivityCode[E]:
        return cls(event=event)

    def round_id(self) -> Optional[RoundId[E]]:
        """Return the enclosing round, or ``None`` for an event-wide code."""

        if self.round is None:
            return None
        return RoundId(event=self.event, round=self.round)

    def compare_specificity(
        self, other: Union[EventActivityCode[E], RoundId[E]]
    ) -> Optional[int]:
        return compare_specificity(self, other)

    def __str__(self) -> str:
        text = str(self.event)
        if self.round is not None:
            text += f"-r{self.round}"
        if self.group is not None:
            text += f"-g{self.group}"
        if self.attempt is not None:
            text += f"-a{self.attempt}"
        return text


@dataclass(frozen=True)
class RoundId(Generic[E]):
    """``event-r{round}``: an event code whose round is always present."""

    event: E
    round: int

    def __post_init__(self) -> None:
        _check_range(self.round, MAX_ROUND, "round")

    @classmethod
    def parse(
        cls,
        text: str,
        event_parser: Callable[[str], E] = OfficialEventId.parse,  # type: ignore[assignment]
    ) -> RoundId[E]:
        event_text, sep, round_text = text.partition("-")
        if not sep:
            raise InvalidFormatError(f"Invalid round id {text!r}")
        event = event_parser(event_text)
        if not round_text.startswith("r"):
            raise MissingRoundPrefixError(f"Missing round prefix in {text!r}")
        return cls(event=event, round=_parse_unsigned(round_text[1:], MAX_ROUND, "round"))

    def to_event_activity_code(self) -> EventActivityCode[E]:
        return EventActivityCode(event=self.event, round=self.round)

    def compare_specificity(
        self, other: Union[EventActivityCode[E], RoundId[E]]
    ) -> Optional[int]:
        return compare_specificity(self, other)

    def __str__(self) -> str:
        return f"{self.event}-r{self.round}"


def _widen(code: Union[EventActivityCode, RoundId]) -> EventActivityCode:
    if isinstance(code, RoundId):
        return code.to_event_activity_code()
    return code


def compare_specificity(
    left: Union[EventActivityCode, RoundId],
    right: Union[EventActivityCode, RoundId],
) -> Optional[int]:
    """Compare two codes by how narrowly they identify an activity.

    Returns ``-1`` when ``left`` is more general than ``right``, ``1`` when
    it is more specific, ``0`` when both are equal and ``None`` when they are
    incomparable: different events, contradicting round/group/attempt
    numbers, or each side refining a part the other leaves open.
    """

    left, right = _widen(left), _widen(right)
    if left.event != right.event:
        return None
    direction = 0
    pairs = (
        (left.round, right.round),
        (left.group, right.group),
        (left.attempt, right.attempt),
    )
    for mine, theirs in pairs:
        if mine == theirs:
            continue
        if mine is not None and theirs is not None:
            return None
        step = 1 if mine is not None else -1
        if direction and step != direction:
            return None
        direction = step
    return direction


class UnofficialKeyword(Enum):
    REGISTRATION = "registration"
    CHECKIN = "checkin"
    TUTORIAL = "tutorial"
    MULTI_SUBMISSION = "multi"
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    AWARDS = "awards"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UnofficialEvent:
    """``unofficial-<event code>`` for events outside the official list."""

    code: EventActivityCode[str]

    def __str__(self) -> str:
        return f"{UNOFFICIAL_EVENT_PREFIX}{self.code}"


@dataclass(frozen=True)
class MiscActivity:
    label: Optional[str] = None

    def __str__(self) -> str:
        if self.label is None:
            return MISC_KEYWORD
        return f"{MISC_KEYWORD}-{self.label}"


@dataclass(frozen=True)
class OtherActivity:
    """Deprecated passthrough for unofficial codes matching no known form.

    Only produced by parsing; new codes should use :class:`MiscActivity`.
    """

    text: str

    def __str__(self) -> str:
        return self.text


UnofficialActivityCode = Union[UnofficialKeyword, UnofficialEvent, MiscActivity, OtherActivity]
ActivityCode = Union[EventActivityCode[OfficialEventId], UnofficialActivityCode]

_KEYWORDS = {keyword.value: keyword for keyword in UnofficialKeyword}


def parse_unofficial_activity_code(text: str) -> UnofficialActivityCode:
    """Parse the part of an unofficial code following ``other-``.

    Unknown strings are accepted as :class:`OtherActivity`; only a malformed
    ``unofficial-`` event code can fail.
    """

    keyword = _KEYWORDS.get(text)
    if keyword is not None:
        return keyword
    if text == MISC_KEYWORD:
        return MiscActivity()
    if text.startswith(UNOFFICIAL_EVENT_PREFIX):
        code = EventActivityCode.parse(
            text[len(UNOFFICIAL_EVENT_PREFIX):], event_parser=_loose_event_id
        )
        return UnofficialEvent(code)
    if text.startswith(f"{MISC_KEYWORD}-"):
        return MiscActivity(label=text[len(MISC_KEYWORD) + 1:])
    if config.WARN_ON_PASSTHROUGH:
        LOGGER.warning("Accepting unknown unofficial activity code %r", text)
    return OtherActivity(text)


def parse_activity_code(text: str) -> ActivityCode:
    if text.startswith(OTHER_PREFIX):
        return parse_unofficial_activity_code(text[len(OTHER_PREFIX):])
    return EventActivityCode.parse(text)


def format_activity_code(code: ActivityCode) -> str:
    if isinstance(code, EventActivityCode):
        return str(code)
    return f"{OTHER_PREFIX}{code}"


def is_official(code: ActivityCode) -> bool:
    return isinstance(code, EventActivityCode)
