from __future__ import annotations

import csv
import logging

import pytest

from passbleed.domain.models import CsvSchema, DomainSet
from passbleed.errors import (
    CorpusLoadError,
    CorpusReadError,
    EmptyFileError,
    UnsupportedFormatError,
)
from passbleed.loaders import CorpusLoader, LeakCorpusLoader, PasswordExportLoader

LASTPASS_HEADER = ["url", "username", "password", "extra", "name", "grouping", "fav"]
KEEPASSX_HEADER = ["Group", "Title", "Username", "Password", "URL", "Notes"]


@pytest.fixture
def export_loader(fake_extractor) -> PasswordExportLoader:
    return PasswordExportLoader(extractor=fake_extractor)


def test_loaders_satisfy_protocol(export_loader):
    assert isinstance(export_loader, CorpusLoader)
    assert isinstance(LeakCorpusLoader(), CorpusLoader)


class TestPasswordExportLoader:
    def test_lastpass_export(self, export_loader, write_csv):
        path = write_csv([LASTPASS_HEADER, ["http://sub.example.com/login", "u", "p", "", "", "", ""]])

        report = export_loader.load(path)

        assert report.csv_schema is CsvSchema.LASTPASS
        assert report.column == 0
        assert report.domains == {"example.com"}
        assert report.rows_read == 1
        assert report.rows_skipped == 0
        assert report.path == path
        assert report.kind == "password export"

    def test_subdomains_collapse_to_one_domain(self, export_loader, write_csv):
        path = write_csv(
            [
                KEEPASSX_HEADER,
                ["g", "t", "u", "p", "https://www.example.com/", ""],
                ["g", "t", "u", "p", "login.example.com:8443", ""],
                ["g", "t", "u", "p", "example.com", ""],
                ["g", "t", "u", "p", "shop.bank.co.uk/basket", ""],
            ]
        )

        report = export_loader.load(path)

        assert report.csv_schema is CsvSchema.KEEPASSX
        assert report.domains == {"example.com", "bank.co.uk"}
        assert report.cardinality == 2
        assert report.rows_read == 4

    def test_bad_rows_are_skipped_without_aborting(self, export_loader, write_csv):
        path = write_csv(
            [
                LASTPASS_HEADER,
                ["http://first.com", "u", "p", "", "", "", ""],
                ["   ", "u", "p", "", "", "", ""],
                ["\x01\x02", "u", "p", "", "", "", ""],
                ["", "u", "p", "", "", "", ""],
                ["co.uk", "u", "p", "", "", "", ""],
                ["http://[::1", "u", "p", "", "", "", ""],
                ["https://last.org/x", "u", "p", "", "", "", ""],
            ]
        )

        report = export_loader.load(path)

        assert report.domains == {"first.com", "last.org"}
        assert report.rows_read == 7
        assert report.rows_skipped == 5

    def test_short_rows_are_skipped(self, export_loader, write_csv):
        path = write_csv(
            [
                KEEPASSX_HEADER,
                ["g", "t", "u"],
                ["g", "t", "u", "p", "kept.net", ""],
            ]
        )

        report = export_loader.load(path)

        assert report.domains == {"kept.net"}
        assert report.rows_skipped == 1

    def test_blank_lines_are_ignored(self, export_loader, write_text):
        path = write_text("\n\nurl,username\n\nhttp://a.com,x\n\n", name="export.csv")

        report = export_loader.load(path)

        assert report.csv_schema is CsvSchema.LASTPASS
        assert report.domains == {"a.com"}
        assert report.rows_read == 1

    def test_byte_order_mark_is_tolerated(self, export_loader, write_text):
        path = write_text("\ufeffurl,username\nhttp://a.com,x\n".encode("utf-8"), name="export.csv")

        report = export_loader.load(path)

        assert report.csv_schema is CsvSchema.LASTPASS
        assert report.domains == {"a.com"}

    def test_loose_quotes_are_tolerated(self, export_loader, write_text):
        path = write_text('url,name\nhttp://a.com,my "quoted" name\nb.org,x\n', name="export.csv")

        report = export_loader.load(path)

        assert report.domains == {"a.com", "b.org"}

    def test_unparseable_csv_row_is_skipped(self, fake_extractor, write_text):
        loader = PasswordExportLoader(extractor=fake_extractor, field_size_limit=64)
        oversized = "x" * 100
        path = write_text(f"url,name\na.com,n\nb.com,{oversized}\nc.com,n\n", name="export.csv")

        report = loader.load(path)

        assert report.domains == {"a.com", "c.com"}
        assert report.rows_read == 3
        assert report.rows_skipped == 1

    def test_field_size_limit_is_restored_after_load(self, fake_extractor, write_text, tmp_path):
        before = csv.field_size_limit()
        loader = PasswordExportLoader(extractor=fake_extractor, field_size_limit=64)

        loader.load(write_text("url,name\na.com,n\n", name="export.csv"))
        assert csv.field_size_limit() == before

        with pytest.raises(EmptyFileError):
            loader.load(write_text(b"", name="empty.csv"))
        assert csv.field_size_limit() == before

        with pytest.raises(CorpusLoadError):
            loader.load(tmp_path / "nope.csv")
        assert csv.field_size_limit() == before

    def test_zero_byte_file_is_empty(self, export_loader, write_text):
        path = write_text(b"", name="export.csv")

        with pytest.raises(EmptyFileError) as excinfo:
            export_loader.load(path)

        assert excinfo.value.path == path
        assert excinfo.value.kind == "password export"
        assert "empty CSV file" in str(excinfo.value)

    def test_blank_only_file_is_empty(self, export_loader, write_text):
        with pytest.raises(EmptyFileError):
            export_loader.load(write_text("\n\n", name="export.csv"))

    def test_unknown_header_is_fatal(self, export_loader, write_csv):
        path = write_csv([["name", "login", "password"], ["a", "b", "c"]])

        with pytest.raises(UnsupportedFormatError) as excinfo:
            export_loader.load(path)

        assert excinfo.value.path == path
        assert str(path) in str(excinfo.value)

    def test_missing_file_is_fatal(self, export_loader, tmp_path):
        path = tmp_path / "nope.csv"

        with pytest.raises(CorpusLoadError, match="cannot open file") as excinfo:
            export_loader.load(path)

        assert excinfo.value.path == path
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_directory_is_fatal(self, export_loader, tmp_path):
        with pytest.raises(CorpusLoadError):
            export_loader.load(tmp_path)

    def test_undecodable_file_is_fatal(self, export_loader, write_text):
        path = write_text(b"url,name\n\xff\xfe\xfa,bad\n", name="export.csv")

        with pytest.raises(CorpusReadError):
            export_loader.load(path)

    def test_loader_returns_fresh_set_each_time(self, export_loader, write_csv):
        path = write_csv([LASTPASS_HEADER, ["a.com", "", "", "", "", "", ""]])

        first = export_loader.load(path)
        second = export_loader.load(path)

        assert first.domains == second.domains
        assert first.domains is not second.domains

    def test_detected_format_is_logged(self, export_loader, write_csv, caplog):
        path = write_csv([KEEPASSX_HEADER, ["g", "t", "u", "p", "a.com", ""]])

        with caplog.at_level(logging.INFO, logger="passbleed"):
            export_loader.load(path)

        assert any("KeePassX" in r.getMessage() for r in caplog.records)


class TestLeakCorpusLoader:
    def test_duplicates_collapse(self, write_text):
        report = LeakCorpusLoader().load(write_text("example.com\nexample.com\nother.org"))

        assert report.cardinality == 2
        assert report.domains == {"example.com", "other.org"}
        assert report.csv_schema is None
        assert report.kind == "leak corpus"

    def test_lines_are_inserted_verbatim(self, write_text):
        report = LeakCorpusLoader().load(write_text("www.Example.com\nhttp://x.org/\n"))

        assert report.domains == {"www.Example.com", "http://x.org/"}

    def test_blank_lines_and_crlf(self, write_text):
        report = LeakCorpusLoader().load(write_text("a.com\r\n\r\n  \r\nb.com\r\n"))

        assert report.domains == {"a.com", "b.com"}
        assert report.rows_read == 4
        assert report.rows_skipped == 2

    def test_order_does_not_matter(self, write_text):
        forward = LeakCorpusLoader().load(write_text("a.com\nb.com\nc.com\n", name="f.txt"))
        backward = LeakCorpusLoader().load(write_text("c.com\nb.com\na.com\n", name="b.txt"))

        assert forward.domains == backward.domains

    def test_empty_file_gives_empty_set(self, write_text):
        report = LeakCorpusLoader().load(write_text(""))

        assert report.domains == DomainSet()

    def test_missing_file_is_fatal(self, tmp_path):
        path = tmp_path / "missing.txt"

        with pytest.raises(CorpusLoadError) as excinfo:
            LeakCorpusLoader().load(path)

        assert excinfo.value.kind == "leak corpus"
        assert excinfo.value.path == path

    def test_read_error_is_fatal(self, write_text):
        path = write_text(b"a.com\n\xff\xfe\xfa\n")

        with pytest.raises(CorpusReadError, match="cannot decode"):
            LeakCorpusLoader().load(path)
