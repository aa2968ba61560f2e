"""Results table helpers.

Pure functions that turn decoded round results into a ranked pandas
DataFrame with display strings, ready for printing or export.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Sequence

import pandas as pd

from .attempt_result import AttemptResult
from .event_ids import OfficialEventId
from .models import ResultType, RoundFormat, RoundResult

LOGGER = logging.getLogger(__name__)

RANK_COL = "Rank"
PERSON_COL = "Person ID"
BEST_COL = "Best"
AVERAGE_COL = "Average"
ATTEMPT_COL_TEMPLATE = "Attempt {}"

BASE_COLUMNS = [RANK_COL, PERSON_COL, BEST_COL, AVERAGE_COL]

_ORDER_COL = "_order"

__all__ = [
    "build_round_table",
    "attempt_columns",
]


def attempt_columns(count: int) -> List[str]:
    return [ATTEMPT_COL_TEMPLATE.format(index + 1) for index in range(count)]


def _attempt_column_count(
    results: Sequence[RoundResult], round_format: Optional[RoundFormat]
) -> int:
    from .config import RESULTS_TABLE_MIN_ATTEMPT_COLUMNS

    count = max((len(result.attempts) for result in results), default=0)
    if round_format is not None:
        count = max(count, round_format.expected_solve_count)
    return max(count, RESULTS_TABLE_MIN_ATTEMPT_COLUMNS)


def _ranking_key(
    best: AttemptResult, average: AttemptResult, sort_by: ResultType
) -> tuple:
    if sort_by is ResultType.AVERAGE:
        return (average.sort_key, best.sort_key)
    return (best.sort_key, average.sort_key)


def _dense_codes(keys: Sequence[tuple]) -> List[int]:
    lookup = {key: index for index, key in enumerate(sorted(set(keys)))}
    return [lookup[key] for key in keys]


def _order_columns(df: pd.DataFrame) -> pd.DataFrame:
    from .config import (
        RESULTS_TABLE_COLUMN_ORDER,
        RESULTS_TABLE_ENFORCE_COLUMN_ORDER,
    )

    preferred_source = (
        RESULTS_TABLE_COLUMN_ORDER if RESULTS_TABLE_ENFORCE_COLUMN_ORDER else BASE_COLUMNS
    )
    preferred_cols = [c for c in preferred_source if c in df.columns]
    remaining = [c for c in df.columns if c not in preferred_cols]
    return df[preferred_cols + remaining]


def build_round_table(
    results: Sequence[RoundResult],
    event: Optional[OfficialEventId] = None,
    round_format: Optional[RoundFormat] = None,
) -> pd.DataFrame:
    """Build a ranked table for one round.

    Args:
        results: Decoded results of every competitor in the round.
        event: Event of the round; selects how result values are displayed
            and compared. Plain centiseconds are assumed when omitted.
        round_format: Format of the round; average formats rank by average
            first, everything else by best single first. Also guarantees one
            column per expected attempt.

    Returns:
        A DataFrame with one row per result, sorted by rank then person id.
        Tied results share the lowest rank.
    """

    view: Callable[[AttemptResult], AttemptResult] = (
        event.result_view if event is not None else (lambda result: result)
    )
    sort_by = round_format.sort_by if round_format is not None else ResultType.SINGLE
    attempt_cols = attempt_columns(_attempt_column_count(results, round_format))

    rows: List[Dict[str, Any]] = []
    keys: List[tuple] = []
    for result in results:
        best = view(result.best)
        average = view(result.average)
        row: Dict[str, Any] = {
            PERSON_COL: result.person_id,
            BEST_COL: str(best),
            AVERAGE_COL: str(average),
        }
        for index, column in enumerate(attempt_cols):
            if index < len(result.attempts):
                row[column] = str(view(result.attempts[index].result))
            else:
                row[column] = ""
        rows.append(row)
        keys.append(_ranking_key(best, average, sort_by))

    if not rows:
        return pd.DataFrame(columns=BASE_COLUMNS + attempt_cols)

    df = pd.DataFrame(rows, columns=[PERSON_COL, BEST_COL, AVERAGE_COL] + attempt_cols)
    df[_ORDER_COL] = _dense_codes(keys)
    df[RANK_COL] = df[_ORDER_COL].rank(method="min", ascending=True).astype(int)
    df.sort_values(by=[RANK_COL, PERSON_COL], inplace=True)
    df = df.drop(columns=[_ORDER_COL]).reset_index(drop=True)
    LOGGER.info(
        "Built results table with %d rows (event=%s, sort_by=%s)",
        len(df),
        event if event is not None else "-",
        sort_by.value,
    )
    return _order_columns(df)
