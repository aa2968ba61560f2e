"""Tests for the packed attempt result codec."""

from __future__ import annotations

import pytest

from wcif_codecs.attempt_result import (
    DNF,
    DNS,
    MAX_RESULT_VALUE,
    SKIPPED,
    AttemptResult,
    CentiSeconds,
    MoveCount,
    MultiBlindResult,
    ResultKind,
    decode_attempt_result,
    decode_move_count_result,
    decode_multi_blind_result,
    encode_attempt_result,
)
from wcif_codecs.errors import InvalidResultError, NotANumberError, WCIFDecodeError


@pytest.mark.parametrize(
    "raw,expected",
    [(0, SKIPPED), (-1, DNF), (-2, DNS)],
)
def test_decode_sentinels(raw: int, expected: AttemptResult) -> None:
    assert decode_attempt_result(raw) == expected
    assert encode_attempt_result(expected) == raw


def test_decode_positive_value_is_success() -> None:
    result = decode_attempt_result(1234)
    assert result.kind is ResultKind.SUCCESS
    assert result.is_success is True
    assert result.ok() == CentiSeconds(1234)
    assert isinstance(result.value, CentiSeconds)
    assert encode_attempt_result(result) == 1234


def test_decode_rejects_other_negative_values() -> None:
    with pytest.raises(InvalidResultError):
        decode_attempt_result(-3)


def test_decode_rejects_values_beyond_32_bits() -> None:
    with pytest.raises(InvalidResultError):
        decode_attempt_result(2**32)


@pytest.mark.parametrize("raw", ["123", 12.5, None, True, [1]])
def test_decode_rejects_non_integers(raw) -> None:
    with pytest.raises(NotANumberError, match="Not a number"):
        decode_attempt_result(raw)


def test_decode_errors_share_base_class() -> None:
    with pytest.raises(WCIFDecodeError):
        decode_attempt_result(-7)
    with pytest.raises(ValueError):
        decode_attempt_result("x")


def test_non_success_has_no_value() -> None:
    assert DNF.ok() is None
    assert SKIPPED.is_success is False
    with pytest.raises(ValueError):
        AttemptResult(ResultKind.DNF, CentiSeconds(5))
    with pytest.raises(ValueError):
        AttemptResult(ResultKind.SUCCESS)


def test_success_wraps_plain_integers() -> None:
    result = AttemptResult.success(950)
    assert isinstance(result.value, CentiSeconds)
    assert str(result) == "9.50"


def test_multi_blind_current_layout() -> None:
    value = MultiBlindResult.from_packed(870300004)
    assert value == MultiBlindResult(attempted=20, solved=16, time=3000, old_style=False)
    assert value.failed == 4
    assert value.points == 12
    assert value.seconds == 3000
    assert value.is_old_style is False
    assert value.encode() == 870300004


def test_multi_blind_legacy_layout() -> None:
    value = MultiBlindResult.from_packed(1832003000)
    assert value == MultiBlindResult(attempted=20, solved=16, time=3000, old_style=True)
    assert value.encode() == 1832003000


def test_multi_blind_encoding_follows_recorded_layout() -> None:
    current = MultiBlindResult(attempted=20, solved=16, time=3000, old_style=False)
    legacy = MultiBlindResult(attempted=20, solved=16, time=3000, old_style=True)
    assert int(current) == 870300004
    assert int(legacy) == 1832003000


def test_to_multi_blind_keeps_non_success_kinds() -> None:
    assert DNF.to_multi_blind() == DNF
    assert decode_multi_blind_result(-2) == DNS
    result = decode_multi_blind_result(870300004)
    assert result.value == MultiBlindResult(20, 16, 3000, False)
    assert result.encode() == 870300004


def test_to_move_count_narrows() -> None:
    result = decode_move_count_result(28)
    assert result.value == MoveCount(28)
    assert isinstance(result.value, MoveCount)
    assert decode_attempt_result(65536 + 30).to_move_count().value == 30


def test_move_count_narrowed_to_zero_is_rejected() -> None:
    with pytest.raises(InvalidResultError):
        decode_move_count_result(65536)


@pytest.mark.parametrize(
    "value",
    [-5, 0, MAX_RESULT_VALUE + 1, CentiSeconds(2**32), MoveCount(-3)],
)
def test_success_payload_must_be_encodable(value: int) -> None:
    with pytest.raises(ValueError):
        AttemptResult.success(value)


def test_constructed_success_survives_encoding() -> None:
    for value in (1, 6000, MAX_RESULT_VALUE):
        result = AttemptResult.success(value)
        assert decode_attempt_result(result.encode()) == result


def test_success_outranks_non_success() -> None:
    fast = decode_attempt_result(500)
    for other in (SKIPPED, DNF, DNS):
        assert fast > other
        assert other < fast


def test_non_success_kinds_rank_equally() -> None:
    assert DNF.ranks_equal(DNS)
    assert SKIPPED.ranks_equal(DNF)
    assert DNF <= DNS and DNF >= DNS
    assert not DNF < DNS
    assert DNF != DNS


def test_smaller_time_is_better() -> None:
    assert decode_attempt_result(900) > decode_attempt_result(1000)
    assert decode_move_count_result(25) > decode_move_count_result(30)


def test_sorting_by_sort_key_puts_best_first() -> None:
    results = [DNF, decode_attempt_result(1200), SKIPPED, decode_attempt_result(800)]
    ordered = sorted(results, key=lambda r: r.sort_key)
    assert [r.encode() for r in ordered[:2]] == [800, 1200]


def test_multi_blind_ranking() -> None:
    more_points = decode_multi_blind_result(860300004)  # 13 points
    baseline = decode_multi_blind_result(870300004)  # 12 points, 3000s
    faster = decode_multi_blind_result(870250006)  # 12 points, 2500s
    assert more_points > baseline
    assert faster > baseline
    fewer_failed = AttemptResult.success(MultiBlindResult(attempted=12, solved=12, time=3000))
    more_failed = AttemptResult.success(MultiBlindResult(attempted=20, solved=16, time=3000))
    assert fewer_failed > more_failed


@pytest.mark.parametrize(
    "raw,expected",
    [
        (0, ""),
        (-1, "DNF"),
        (-2, "DNS"),
        (5, "0.05"),
        (950, "9.50"),
        (5999, "59.99"),
        (6000, "1:00.00"),
        (12345, "2:03.45"),
        (360000, "1:00:00.00"),
        (372305, "1:02:03.05"),
    ],
)
def test_centisecond_display(raw: int, expected: str) -> None:
    assert str(decode_attempt_result(raw)) == expected


@pytest.mark.parametrize(
    "raw,expected",
    [(28, "28"), (80, "80"), (3325, "33.25"), (3305, "33.05"), (-1, "DNF")],
)
def test_move_count_display(raw: int, expected: str) -> None:
    assert str(decode_move_count_result(raw)) == expected


def test_multi_blind_display() -> None:
    assert str(decode_multi_blind_result(870300004)) == "16/20 50:00"
    long_attempt = AttemptResult.success(MultiBlindResult(attempted=30, solved=25, time=3725))
    assert str(long_attempt) == "25/30 1:02:05"
    assert str(decode_multi_blind_result(0)) == ""
