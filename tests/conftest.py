"""Shared fixtures for the WCIF codec tests.

Makes the package importable from a source checkout and builds decoded
round results for the record and results table tests.
"""
from __future__ import annotations

import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from wcif_codecs.models import RoundResult


# --- Factory helpers -------------------------------------------------
def make_round_result(person_id, attempts, best, average, ranking=None):
    return {
        "personId": person_id,
        "ranking": ranking,
        "attempts": [{"result": value} for value in attempts],
        "best": best,
        "average": average,
    }


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def average_round_payload():
    return [
        make_round_result(1, [1000, 1100, 1200, 900, 1300], 900, 1100, ranking=2),
        make_round_result(2, [950, 1000, 1050, -1, 1000], 950, 1017, ranking=1),
        make_round_result(3, [-1, -1, 1500, 1400, -2], 1400, -1, ranking=4),
        make_round_result(4, [1200, 1100, 1100, 1000, 1200], 1000, 1133, ranking=3),
    ]


@pytest.fixture
def average_round_results(average_round_payload):
    return [RoundResult.from_dict(item) for item in average_round_payload]


@pytest.fixture
def multi_blind_round_results():
    return [
        RoundResult.from_dict(make_round_result(10, [870300004, 910360001], 870300004, 0)),
        RoundResult.from_dict(make_round_result(11, [870250006], 870250006, 0)),
        RoundResult.from_dict(make_round_result(12, [-1, 980030000], 980030000, 0)),
    ]


@pytest.fixture
def round_payload():
    return make_round_result
