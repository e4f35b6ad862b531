"""Tests for the parse, sort and write pipeline."""

import json

import pytest
from lxml import etree

from numsort import sort_and_write
from numsort.core.config import Settings
from numsort.core.exceptions import ConfigurationError, ParseError, UnsupportedFormatError
from numsort.core.models import OutputFormat


class TestSortAndWrite:
    """Tests for sort_and_write."""

    def test_text_example(self, tmp_path, settings):
        result = sort_and_write("3,1,2", "text", settings)

        assert result.path == tmp_path / "SortedNumbers.text"
        assert result.format is OutputFormat.TEXT
        assert result.path.read_text().splitlines() == ["3", "2", "1"]

    def test_json_example(self, tmp_path, settings):
        result = sort_and_write("10,-5,0", "json", settings)

        assert result.file_name == "SortedNumbers.json"
        assert result.path.read_text() == "[10,0,-5]"

    def test_result_reports_written_numbers(self, settings):
        result = sort_and_write("5,-2,9,0", "xml", settings)

        assert result.numbers == [9, 5, 0, -2]
        assert result.count == 4

    @pytest.mark.parametrize("fmt", ["text", "xml", "json"])
    def test_round_trip_is_descending_permutation(self, fmt, settings):
        values = [4, -1, 4, 0, 9, -17, 3]
        raw = ",".join(str(v) for v in values)

        result = sort_and_write(raw, fmt, settings)

        if fmt == "text":
            read_back = [int(line) for line in result.path.read_text().splitlines()]
        elif fmt == "xml":
            read_back = [int(el.text) for el in etree.parse(str(result.path)).getroot()]
        else:
            read_back = json.loads(result.path.read_text())

        assert read_back == sorted(values, reverse=True)

    def test_format_case_does_not_change_output(self, tmp_path):
        contents = set()
        for token in ["json", "JSON", "Json"]:
            out = tmp_path / token
            out.mkdir()
            result = sort_and_write("2,8,-3", token, Settings(output_dir=out))
            assert result.path.name == "SortedNumbers.json"
            contents.add(result.path.read_bytes())

        assert contents == {b"[8,2,-3]"}

    def test_unsupported_format_creates_no_file(self, tmp_path, settings):
        with pytest.raises(UnsupportedFormatError) as exc_info:
            sort_and_write("1,2,3", "YAML", settings)

        assert exc_info.value.token == "YAML"
        assert list(tmp_path.iterdir()) == []

    def test_malformed_number_creates_no_file(self, tmp_path, settings):
        with pytest.raises(ParseError) as exc_info:
            sort_and_write("5,abc,9", "json", settings)

        assert exc_info.value.token == "abc"
        assert list(tmp_path.iterdir()) == []

    def test_parse_error_reported_before_format_error(self, settings):
        with pytest.raises(ParseError):
            sort_and_write("5,abc", "YAML", settings)

    def test_custom_delimiter(self, tmp_path):
        result = sort_and_write("1|3|2", "text", Settings(output_dir=tmp_path, delimiter="|"))
        assert result.path.read_text() == "3\n2\n1\n"

    def test_missing_output_dir(self, tmp_path):
        settings = Settings(output_dir=tmp_path / "nope")

        with pytest.raises(ConfigurationError) as exc_info:
            sort_and_write("1", "text", settings)

        assert exc_info.value.setting == "output_dir"

    def test_uses_cached_settings_by_default(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = sort_and_write("1,2", "text")

        assert (tmp_path / "SortedNumbers.text").read_text() == "2\n1\n"
        assert result.path.name == "SortedNumbers.text"
