import os

import pytest

from unitconv.config import Config
from unitconv.exceptions import DefinitionFileNotFoundError, DefinitionSyntaxError
from unitconv.ingest import load_definitions, locate_definition_file, parse_line, read_definitions
from unitconv.schema import DefineRelation, DefineUnit


def test_parse_node():
    assert parse_line("node eV electronvolt\n") == DefineUnit(id="eV", long_name="electronvolt")


def test_parse_edge():
    record = parse_line("edge meV 0.001 eV NOINVERT")
    assert record == DefineRelation(from_id="meV", factor=0.001, to_id="eV", inverted=False)


def test_parse_inverted_edge():
    record = parse_line("edge eV 1239.842 nm INVERT")
    assert record.inverted is True
    assert record.factor == 1239.842


def test_extra_tokens_ignored():
    assert parse_line("node K Kelvin absolute scale") == DefineUnit(id="K", long_name="Kelvin")


@pytest.mark.parametrize("line", ["# a comment", "#node x y", "", "   \n"])
def test_comments_and_blank_lines_skipped(line):
    assert parse_line(line) is None


def test_zero_factor_is_parsed():
    # rejected later by the graph, not by the reader
    assert parse_line("edge a 0 b NOINVERT").factor == 0.0


@pytest.mark.parametrize(
    "line, message",
    [
        ("unit eV electronvolt", "invalid type in definition file: unit"),
        ("edge a 2 b FALSE", "inversion flag must be INVERT or NOINVERT"),
        ("edge a 2 b invert", "inversion flag must be INVERT or NOINVERT"),
        ("edge a two b NOINVERT", "invalid conversion factor: two"),
        ("edge a 2 b", "edge definition needs"),
        ("node eV", "node definition needs"),
        ("edge a inf b NOINVERT", "invalid conversion factor: inf"),
        ("edge a -Infinity b INVERT", "invalid conversion factor: -Infinity"),
        ("edge a nan b NOINVERT", "invalid conversion factor: nan"),
    ],
)
def test_syntax_errors(line, message):
    with pytest.raises(DefinitionSyntaxError) as exc_info:
        parse_line(line, 7, "units.def")
    assert message in str(exc_info.value)
    assert exc_info.value.line_number == 7
    assert "units.def:7" in str(exc_info.value)


def test_read_definitions_reports_line_numbers():
    lines = ["# header\n", "node a first\n", "bogus line\n"]
    records = read_definitions(lines, source="inline")
    assert next(records) == DefineUnit(id="a", long_name="first")
    with pytest.raises(DefinitionSyntaxError) as exc_info:
        next(records)
    assert exc_info.value.line_number == 3


def test_load_definitions(definition_file):
    records = list(load_definitions(definition_file))
    assert len(records) == 9
    assert records[0] == DefineUnit(id="meV", long_name="millielectronvolt")
    assert records[-1] == DefineRelation(from_id="Ha", factor=27.211386, to_id="eV", inverted=False)


def test_load_missing_definitions(tmp_path):
    with pytest.raises(DefinitionFileNotFoundError):
        list(load_definitions(tmp_path / "missing.def"))


def test_locate_prefers_current_directory(tmp_path, monkeypatch):
    home = tmp_path / "home"
    (home / "bin").mkdir(parents=True)
    (home / "bin" / "convert.def").write_text("node a a\n")
    work = tmp_path / "work"
    work.mkdir()
    (work / "convert.def").write_text("node b b\n")
    monkeypatch.setenv("HOME", str(home))

    assert locate_definition_file(Config(), cwd=work) == work / "convert.def"


def test_locate_falls_back_to_home_bin(tmp_path, monkeypatch):
    home = tmp_path / "home"
    (home / "bin").mkdir(parents=True)
    (home / "bin" / "convert.def").write_text("node a a\n")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)

    assert locate_definition_file(Config()) == home / "bin" / "convert.def"


def test_locate_explicit_file(definition_file, tmp_path):
    config = Config(definition_file=definition_file)
    assert locate_definition_file(config, cwd=tmp_path / "elsewhere") == definition_file


def test_locate_nothing_found(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    with pytest.raises(DefinitionFileNotFoundError) as exc_info:
        locate_definition_file(Config(), cwd=tmp_path)
    assert exc_info.value.searched == [
        tmp_path / "convert.def",
        tmp_path / "home" / "bin" / "convert.def",
    ]


def test_locate_without_home(tmp_path, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(DefinitionFileNotFoundError) as exc_info:
        locate_definition_file(Config(), cwd=tmp_path)
    assert exc_info.value.searched == [tmp_path / "convert.def"]
