"""
Case-conversion tests for acronym -> identifier derivation.
"""

import pytest

from courtlist.casing import (
    case_samples,
    needs_rename,
    split_words,
    to_cobol_case,
    to_identifier,
    to_pascal_case,
)


class TestSplitWords:

    def test_letter_digit_boundary(self):
        assert split_words("TRT1") == ["TRT", "1"]
        assert split_words("Trt1") == ["Trt", "1"]
        assert split_words("1TRT") == ["1", "TRT"]

    def test_lower_upper_boundary(self):
        assert split_words("TreCe") == ["Tre", "Ce"]

    def test_acronym_before_word(self):
        assert split_words("ABCDef") == ["ABC", "Def"]

    def test_separators_are_dropped(self):
        assert split_words("TJ-SP") == ["TJ", "SP"]
        assert split_words("tj_sp  x") == ["tj", "sp", "x"]
        assert split_words("--") == []


@pytest.mark.parametrize(
    "acronym,identifier,rename",
    [
        ("STF", "Stf", False),
        ("TJ-SP", "TjSp", False),
        ("TRE-CE", "TreCe", False),
        ("TRT1", "Trt1", True),
        ("TRF-1", "Trf1", False),
        ("TRT10", "Trt10", True),
        ("1TRT", "_1Trt", True),
        ("tjsp", "Tjsp", True),
        ("SELF", "Self_", True),
    ],
)
def test_identifier_and_rename_corner_cases(acronym, identifier, rename):
    assert to_identifier(acronym) == identifier
    assert needs_rename(acronym) is rename


def test_identifier_round_trips_when_no_rename_needed():
    for acronym in ["STF", "TJ-SP", "TRF-1", "TJDFT"]:
        assert to_cobol_case(to_identifier(acronym)) == acronym


def test_empty_acronym_gets_placeholder_and_rename():
    assert to_identifier("") == "Unnamed"
    assert needs_rename("") is True


def test_pascal_and_cobol_samples():
    assert to_pascal_case("TRT1") == "Trt1"
    assert to_cobol_case("Trt1") == "TRT-1"
    assert to_cobol_case("TreCe") == "TRE-CE"
    assert case_samples() == ["Trt1", "TRT-1", "TRE-CE"]
