"""WCIF value codecs: attempt results, activity codes and identifiers."""

from .activity_code import (
    EventActivityCode,
    MiscActivity,
    OtherActivity,
    RoundId,
    UnofficialEvent,
    UnofficialKeyword,
    compare_specificity,
    format_activity_code,
    is_official,
    parse_activity_code,
)
from .attempt_result import (
    DNF,
    DNS,
    SKIPPED,
    AttemptResult,
    CentiSeconds,
    MoveCount,
    MultiBlindResult,
    ResultKind,
    decode_attempt_result,
    encode_attempt_result,
)
from .errors import FieldDecodeError, WCIFDecodeError
from .event_ids import OfficialEventId, PuzzleType
from .identifiers import COMPETITOR, AssignmentCode, OtherStaffRole, StaffRole, WCAId

__all__ = [
    "AttemptResult",
    "ResultKind",
    "CentiSeconds",
    "MoveCount",
    "MultiBlindResult",
    "SKIPPED",
    "DNF",
    "DNS",
    "decode_attempt_result",
    "encode_attempt_result",
    "EventActivityCode",
    "RoundId",
    "UnofficialKeyword",
    "UnofficialEvent",
    "MiscActivity",
    "OtherActivity",
    "compare_specificity",
    "format_activity_code",
    "is_official",
    "parse_activity_code",
    "OfficialEventId",
    "PuzzleType",
    "WCAId",
    "AssignmentCode",
    "StaffRole",
    "OtherStaffRole",
    "COMPETITOR",
    "WCIFDecodeError",
    "FieldDecodeError",
]
