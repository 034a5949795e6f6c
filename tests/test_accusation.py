import pytest

from accusation import classify, count_clue_matches, evaluate_accusation, verdict_message
from case_data import CLUE_SUSPECTS
from models import Verdict
from suspect_index import SuspectIndex


GARDENER_CLUES = ["Pegadas de lama recentes", "Chave antiga caída entre as flores"]


@pytest.fixture
def index():
    return SuspectIndex.from_pairs(CLUE_SUSPECTS)


@pytest.mark.parametrize(
    "count, verdict",
    [(0, Verdict.UNFOUNDED), (1, Verdict.WEAK), (2, Verdict.CONFIRMED), (5, Verdict.CONFIRMED)],
)
def test_classify(count, verdict):
    assert classify(count) is verdict


def test_two_matching_clues_confirm(index):
    assert count_clue_matches(index, GARDENER_CLUES, "Jardineiro") == 2
    result = evaluate_accusation(index, GARDENER_CLUES, "Jardineiro")
    assert result.verdict is Verdict.CONFIRMED
    assert result.evidence == tuple(sorted(GARDENER_CLUES))


def test_no_matching_clue_is_unfounded(index):
    assert count_clue_matches(index, GARDENER_CLUES, "Governanta") == 0
    assert evaluate_accusation(index, GARDENER_CLUES, "Governanta").verdict is Verdict.UNFOUNDED


def test_single_match_is_weak(index):
    clues = ["Pegadas de lama recentes", "Copo quebrado com marca de batom"]
    result = evaluate_accusation(index, clues, "Governanta")
    assert result.count == 1
    assert result.verdict is Verdict.WEAK


def test_match_is_exact(index):
    assert count_clue_matches(index, GARDENER_CLUES, "jardineiro") == 0


def test_unknown_clues_never_count(index):
    clues = ["Bilhete anônimo", "Luva perdida"]
    assert count_clue_matches(index, clues, "Unknown") == 0
    assert count_clue_matches(index, clues, "Jardineiro") == 0


def test_surrounding_whitespace_is_ignored(index):
    result = evaluate_accusation(index, GARDENER_CLUES, "  Jardineiro \n")
    assert result.suspect == "Jardineiro"
    assert result.verdict is Verdict.CONFIRMED


@pytest.mark.parametrize("raw", ["", "   ", "\t\n"])
def test_blank_accusation_is_aborted(index, raw):
    assert evaluate_accusation(index, GARDENER_CLUES, raw) is None


def test_verdict_messages_are_distinct(index):
    aborted   = verdict_message(None)
    unfounded = verdict_message(evaluate_accusation(index, GARDENER_CLUES, "Mordomo"))
    confirmed = verdict_message(evaluate_accusation(index, GARDENER_CLUES, "Jardineiro"))
    assert "abandoned" in aborted
    assert "UNFOUNDED" in unfounded
    assert "CONFIRMED" in confirmed
    assert len({aborted, unfounded, confirmed}) == 3
