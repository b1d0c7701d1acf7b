from unittest.mock import AsyncMock

import pytest

from export_browser.config import Settings
from export_browser.core.exceptions import DecodeFailedError
from export_browser.domains.preview.classifier import classify, extension_of
from export_browser.domains.preview.decoders import decode_binary, parse_delimited
from export_browser.domains.preview.models import PreviewKind
from export_browser.domains.preview.registry import build_default_registry
from export_browser.domains.preview.resource_lifecycle import ResourceLifecycle


class TestClassify:

    @pytest.fixture
    def registry(self, tmp_path):
        settings = Settings(documents_root=str(tmp_path))
        return build_default_registry(settings, AsyncMock(), ResourceLifecycle())

    @pytest.mark.parametrize(
        "filename, expected",
        [
            ("notes.txt", PreviewKind.TEXT),
            ("NOTES.TXT", PreviewKind.TEXT),
            ("statement.2024.csv", PreviewKind.TABULAR),
            ("Report.Pdf", PreviewKind.BINARY_RESOURCE),
            ("d.exe", PreviewKind.UNSUPPORTED),
            ("archive.pdf.zip", PreviewKind.UNSUPPORTED),
            ("README", PreviewKind.UNSUPPORTED),
            ("trailing.", PreviewKind.UNSUPPORTED),
            (".txt", PreviewKind.TEXT),
        ],
    )
    def test_classify_uses_last_suffix_only(self, registry, filename, expected):
        assert classify(filename) == expected
        assert registry.kind_for(filename) == expected

    def test_extension_of(self):
        assert extension_of("a.b.CSV") == "csv"
        assert extension_of("noext") == ""


class TestParseDelimited:

    def test_header_row_names_the_columns(self):
        columns, rows = parse_delimited("b.csv", "name,age\nAlice,30\nBob,25")

        assert columns == ["name", "age"]
        assert rows == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]
        assert list(rows[0].keys()) == ["name", "age"]

    def test_values_stay_strings(self):
        _, rows = parse_delimited("n.csv", "amount,paid\n001.50,true\n")
        assert rows == [{"amount": "001.50", "paid": "true"}]

    def test_empty_lines_are_skipped(self):
        _, rows = parse_delimited("gaps.csv", "\nname,age\n\nAlice,30\n\n\nBob,25\n")
        assert rows == [{"name": "Alice", "age": "30"}, {"name": "Bob", "age": "25"}]

    def test_quoted_cells_with_commas_and_newlines(self):
        text = 'name,memo\r\n"Doe, Jane","line one\nline two"\r\n'
        _, rows = parse_delimited("q.csv", text)
        assert rows == [{"name": "Doe, Jane", "memo": "line one\nline two"}]

    def test_short_rows_are_padded_and_long_rows_truncated(self):
        _, rows = parse_delimited("ragged.csv", "a,b,c\n1\n1,2,3,4\n")
        assert rows == [{"a": "1", "b": "", "c": ""}, {"a": "1", "b": "2", "c": "3"}]

    def test_duplicate_headers_are_renamed(self):
        columns, rows = parse_delimited("dup.csv", "id,id,id_1\n1,2,3\n")
        assert columns == ["id", "id_1", "id_1_1"]
        assert rows == [{"id": "1", "id_1": "2", "id_1_1": "3"}]

    def test_byte_order_mark_is_dropped_from_header(self):
        columns, _ = parse_delimited("bom.csv", "\ufeffname,age\nA,1\n")
        assert columns == ["name", "age"]

    def test_empty_text_has_no_rows(self):
        assert parse_delimited("empty.csv", "") == ([], [])

    def test_header_only(self):
        assert parse_delimited("h.csv", "name,age\n") == (["name", "age"], [])


class TestDecodeBinary:

    def test_invalid_base64_is_decode_failure(self):
        with pytest.raises(DecodeFailedError) as exc_info:
            decode_binary("c.pdf", "%%%not-base64%%%")
        assert exc_info.value.format == "binary"

    def test_raw_bytes_pass_through(self):
        assert decode_binary("c.pdf", b"%PDF-1.4") == b"%PDF-1.4"
