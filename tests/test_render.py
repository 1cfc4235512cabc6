"""
Renderer tests for the PostgreSQL and Rust enum declarations.
"""

import pytest
from pydantic import ValidationError

from courtlist.render import render_postgres_enum, render_rust_enum
from courtlist.schema import Court, CourtList


def _courts(*pairs):
    return CourtList(courts=[Court(name=name, acronym=acronym) for name, acronym in pairs])


class TestPostgresEnum:

    def test_single_court(self):
        out = render_postgres_enum(_courts(("Tribunal Um", "TRT1")))
        assert out == "CREATE TYPE kyc.courts AS enum(\n\t'TRT1'\n);"

    def test_commas_on_all_but_last(self):
        out = render_postgres_enum(_courts(("A", "STF"), ("B", "TJ-SP"), ("C", "TRT1")))
        assert out.splitlines() == [
            "CREATE TYPE kyc.courts AS enum(",
            "\t'STF',",
            "\t'TJ-SP',",
            "\t'TRT1'",
            ");",
        ]

    def test_custom_schema_and_type(self):
        out = render_postgres_enum(_courts(("A", "STF")), schema="public", type_name="tribunais")
        assert out.startswith("CREATE TYPE public.tribunais AS enum(")

    def test_acronyms_are_not_escaped(self):
        out = render_postgres_enum(_courts(("A", "O'X")))
        assert "\t'O'X'" in out


class TestRustEnum:

    def test_round_trip_scenario_variant(self):
        out = render_rust_enum(_courts(("Tribunal Um", "TRT1")))
        assert out.splitlines() == [
            "pub enum Courts {",
            "\t/// Tribunal Um",
            '\t#[serde(rename = "TRT1")]',
            "\tTrt1,",
            "}",
        ]

    def test_hyphenated_acronym_has_no_rename(self):
        out = render_rust_enum(_courts(("Tribunal de Justiça de São Paulo", "TJ-SP")))
        assert "serde" not in out
        assert "\t/// Tribunal de Justiça de São Paulo\n\tTjSp," in out

    def test_order_and_variant_count(self):
        courts = _courts(("A", "STF"), ("B", "TRT2"), ("C", "TJ-RJ"))
        out = render_rust_enum(courts, enum_name="Tribunais")
        lines = out.splitlines()
        assert lines[0] == "pub enum Tribunais {"
        variants = [line.strip() for line in lines if line.strip().endswith(",")]
        assert variants == ["Stf,", "Trt2,", "TjRj,"]
        assert sum(line.strip().startswith("///") for line in lines) == len(courts)

    def test_keyword_acronym_gets_suffix_and_rename(self):
        out = render_rust_enum(_courts(("Tribunal Self", "SELF")))
        assert '\t#[serde(rename = "SELF")]\n\tSelf_,' in out

    def test_colliding_identifiers_are_disambiguated(self, caplog):
        courts = _courts(("A", "TRT1"), ("B", "TRT-1"), ("C", "trt1"))
        with caplog.at_level("WARNING", logger="courtlist.render"):
            out = render_rust_enum(courts)
        assert out.splitlines() == [
            "pub enum Courts {",
            "\t/// A",
            '\t#[serde(rename = "TRT1")]',
            "\tTrt1,",
            "\t/// B",
            '\t#[serde(rename = "TRT-1")]',
            "\tTrt1_2,",
            "\t/// C",
            '\t#[serde(rename = "trt1")]',
            "\tTrt1_3,",
            "}",
        ]
        assert sum("duplicates variant" in r.getMessage() for r in caplog.records) == 2


def test_court_list_rejects_empty():
    with pytest.raises(ValidationError):
        CourtList(courts=[])


def test_court_rejects_non_string_fields():
    with pytest.raises(ValidationError):
        Court(name="Tribunal", acronym=1)
