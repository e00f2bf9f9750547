"""Tests for columns module."""

from __future__ import annotations

import pytest

from sheet_export.columns import (
    EMPTY_COLUMN,
    compare,
    index_to_label,
    label_range,
    label_to_index,
    max_label,
    next_label,
)


@pytest.mark.parametrize(
    ("index", "label"),
    [
        (1, "A"),
        (2, "B"),
        (26, "Z"),
        (27, "AA"),
        (52, "AZ"),
        (53, "BA"),
        (702, "ZZ"),
        (703, "AAA"),
        (16384, "XFD"),
    ],
)
def test_index_to_label_known_values(index: int, label: str) -> None:
    assert index_to_label(index) == label
    assert label_to_index(label) == index


def test_round_trip_first_labels() -> None:
    for index in range(1, 20000):
        assert label_to_index(index_to_label(index)) == index


def test_round_trip_large_index() -> None:
    index = 26**6 + 12345
    assert label_to_index(index_to_label(index)) == index
    assert len(index_to_label(index)) == 6


def test_zero_maps_to_empty_column() -> None:
    assert index_to_label(0) == EMPTY_COLUMN
    assert label_to_index(EMPTY_COLUMN) == 0


def test_negative_index_raises() -> None:
    with pytest.raises(ValueError):
        index_to_label(-1)


@pytest.mark.parametrize("label", ["a", "A1", "Ä", " A"])
def test_invalid_label_raises(label: str) -> None:
    with pytest.raises(ValueError):
        label_to_index(label)


def test_compare_cross_length() -> None:
    assert compare("Z", "AA") == -1
    assert compare("AA", "Z") == 1
    assert compare("AZ", "BA") == -1
    assert compare("ZZ", "AAA") == -1
    assert compare("AB", "AB") == 0


def test_compare_matches_index_order() -> None:
    labels = [index_to_label(i) for i in range(1, 800, 7)]
    for a in labels:
        for b in labels:
            expected = (label_to_index(a) > label_to_index(b)) - (
                label_to_index(a) < label_to_index(b)
            )
            assert compare(a, b) == expected


def test_compare_empty_sorts_first() -> None:
    assert compare(EMPTY_COLUMN, "A") == -1


def test_max_label() -> None:
    assert max_label("Z", "AA") == "AA"
    assert max_label("BA", "AZ") == "BA"
    assert max_label("C", "C") == "C"


def test_next_label() -> None:
    assert next_label("A") == "B"
    assert next_label("Z") == "AA"
    assert next_label("AZ") == "BA"
    assert next_label("ZZ") == "AAA"
    assert next_label(EMPTY_COLUMN) == "A"


def test_label_range() -> None:
    assert label_range("C") == ["A", "B", "C"]
    assert label_range(EMPTY_COLUMN) == []
    result = label_range("AB")
    assert len(result) == 28
    assert result[25:] == ["Z", "AA", "AB"]
