from __future__ import annotations

import pytest

from pokespeare.domain.sentences import clean_description, split_sentences


def test_split_keeps_periods_with_sentences() -> None:
    assert split_sentences("A. B. C.") == ("A.", "B.", "C.")


def test_joining_units_reproduces_text() -> None:
    assert " ".join(split_sentences("A. B. C.")) == "A. B. C."


def test_clean_replaces_each_control_character_with_a_space() -> None:
    assert clean_description("one\ntwo\fthree\rfour\r\nfive") == "one two three four  five"


def test_split_handles_multi_line_flavor_text() -> None:
    raw = "Spits fire that\nis hot enough to\nmelt boulders.\fKnown to cause\nforest fires\nunintentionally."

    assert split_sentences(raw) == (
        "Spits fire that is hot enough to melt boulders.",
        "Known to cause forest fires unintentionally.",
    )


def test_split_collapses_whitespace_runs_at_boundaries() -> None:
    assert split_sentences("First.   \n  Second.") == ("First.", "Second.")


def test_split_does_not_break_on_periods_without_following_whitespace() -> None:
    assert split_sentences("It weighs 6.0 kg. Cute.") == ("It weighs 6.0 kg.", "Cute.")


def test_split_keeps_trailing_text_without_period() -> None:
    assert split_sentences("Sleeps a lot. Wakes up hungry") == ("Sleeps a lot.", "Wakes up hungry")


@pytest.mark.parametrize("raw", ["", "   ", "\n\f\r", " \n "])
def test_split_drops_blank_units(raw: str) -> None:
    assert split_sentences(raw) == ()


def test_split_trims_leading_and_trailing_whitespace() -> None:
    assert split_sentences("  Leading. Trailing.  ") == ("Leading.", "Trailing.")


@pytest.mark.parametrize(
    "raw",
    [
        "A. B. C.",
        "Spits fire that\nis hot enough to\nmelt boulders.\fKnown to cause\nforest fires.",
        "No period here",
        "Ends with dots... Then more.",
    ],
)
def test_resplitting_a_unit_yields_the_same_unit(raw: str) -> None:
    for unit in split_sentences(raw):
        assert split_sentences(unit) == (unit,)
