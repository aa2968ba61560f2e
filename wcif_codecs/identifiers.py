"""Personal identifiers and assignment codes."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import config
from .errors import DigitParseError, InvalidAssignmentError, LengthError

LOGGER = logging.getLogger(__name__)

WCA_ID_LENGTH = 10
COMPETITOR_CODE = "competitor"
STAFF_PREFIX = "staff-"

_DIGITS = re.compile(r"[0-9]+")

__all__ = [
    "WCAId",
    "StaffRole",
    "OtherStaffRole",
    "StaffAssignment",
    "AssignmentCode",
    "COMPETITOR",
    "parse_staff_assignment",
]


def _parse_digits(text: str, what: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise DigitParseError(f"Invalid {what} {text!r}")
    return int(text)


@dataclass(frozen=True, order=True)
class WCAId:
    """Ten-character WCA identifier such as ``2015DOEJ01``.

    Orders by year, then name, then discriminant.
    """

    year: int
    name: str
    discriminant: int

    def __post_init__(self) -> None:
        if not 0 <= self.year <= 9999:
            raise ValueError(f"WCA ID year {self.year} outside 0..9999")
        if len(self.name) != 4:
            raise ValueError(f"WCA ID name {self.name!r} must be 4 characters")
        if not 0 <= self.discriminant <= 99:
            raise ValueError(f"WCA ID discriminant {self.discriminant} outside 0..99")

    @classmethod
    def parse(cls, text: str) -> WCAId:
        if len(text) != WCA_ID_LENGTH:
            raise LengthError(len(text), WCA_ID_LENGTH)
        return cls(
            year=_parse_digits(text[:4], "WCA ID year"),
            name=text[4:8],
            discriminant=_parse_digits(text[8:], "WCA ID discriminant"),
        )

    def __str__(self) -> str:
        return f"{self.year:04d}{self.name}{self.discriminant:02d}"


class StaffRole(Enum):
    JUDGE = "judge"
    SCRAMBLER = "scrambler"
    RUNNER = "runner"
    DATA_ENTRY = "dataentry"
    ANNOUNCER = "announcer"

    @property
    def is_competitor_staffing_role(self) -> bool:
        """Roles usually filled by competitors rather than dedicated staff."""
        return self in {StaffRole.JUDGE, StaffRole.SCRAMBLER, StaffRole.RUNNER}

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class OtherStaffRole:
    """Deprecated passthrough for staff roles outside the known set."""

    name: str

    @property
    def is_competitor_staffing_role(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.name


StaffAssignment = Union[StaffRole, OtherStaffRole]

_ROLES = {role.value: role for role in StaffRole}


def parse_staff_assignment(text: str) -> StaffAssignment:
    role = _ROLES.get(text)
    if role is not None:
        return role
    if config.WARN_ON_PASSTHROUGH:
        LOGGER.warning("Accepting unknown staff role %r", text)
    return OtherStaffRole(text)


@dataclass(frozen=True)
class AssignmentCode:
    """``competitor`` or ``staff-<role>``; ``staff`` is ``None`` for competitors."""

    staff: Optional[StaffAssignment] = None

    @classmethod
    def parse(cls, text: str) -> AssignmentCode:
        if text == COMPETITOR_CODE:
            return COMPETITOR
        if text.startswith(STAFF_PREFIX) and len(text) > len(STAFF_PREFIX):
            return cls(staff=parse_staff_assignment(text[len(STAFF_PREFIX):]))
        raise InvalidAssignmentError(f"Invalid assignment code {text!r}")

    @classmethod
    def for_staff(cls, role: StaffAssignment) -> AssignmentCode:
        return cls(staff=role)

    @property
    def is_competitor(self) -> bool:
        return self.staff is None

    def __str__(self) -> str:
        if self.staff is None:
            return COMPETITOR_CODE
        return f"{STAFF_PREFIX}{self.staff}"


COMPETITOR = AssignmentCode()
