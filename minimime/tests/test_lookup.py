"""Tests for the public lookup functions."""

from __future__ import annotations

import pytest

import minimime
from minimime import lookup_by_content_type, lookup_by_extension, lookup_by_filename


class TestLookupByFilename:
    def test_pdf(self) -> None:
        info = lookup_by_filename("document.pdf")
        assert info is not None
        assert info.content_type == "application/pdf"
        assert info.is_binary()

    def test_javascript(self) -> None:
        assert lookup_by_filename("app.js").content_type == "application/javascript"

    def test_case_insensitive(self) -> None:
        assert lookup_by_filename("report.PDF") == lookup_by_extension("pdf")

    def test_compound_suffix_uses_last_segment(self) -> None:
        info = lookup_by_filename("archive.tar.gz")
        assert info == lookup_by_extension("gz")
        assert info.content_type == "application/gzip"

    def test_path(self) -> None:
        assert lookup_by_filename("/var/www/site.v2/index.html").content_type == "text/html"

    @pytest.mark.parametrize(
        "filename",
        ["unknownfile", "Makefile", "noext", ".gitignore", "trailing.", "", "a.frog"],
    )
    def test_absent(self, filename: str) -> None:
        assert lookup_by_filename(filename) is None

    @pytest.mark.parametrize(
        ("filename", "content_type"),
        [
            ("a.GTM", "application/vnd.groove-tool-message"),
            ("a.gtm", "application/vnd.groove-tool-message"),
            ("a.123", "application/vnd.lotus-1-2-3"),
            ("a.Z", "application/x-compressed"),
            ("a.z", "application/x-compressed"),
            ("a.zmm", "application/vnd.handheld-entertainment+xml"),
            ("x.csv", "text/csv"),
            ("x.mda", "application/x-msaccess"),
            (".config.json", "application/json"),
        ],
    )
    def test_known(self, filename: str, content_type: str) -> None:
        assert lookup_by_filename(filename).content_type == content_type


class TestLookupByExtension:
    def test_json(self) -> None:
        info = lookup_by_extension("json")
        assert info.content_type == "application/json"
        assert not info.is_binary()

    def test_mixed_case(self) -> None:
        assert lookup_by_extension("PDF") == lookup_by_extension("pdf")
        assert lookup_by_extension("ZiP").content_type == "application/zip"

    def test_leading_dot(self) -> None:
        assert lookup_by_extension(".png") == lookup_by_extension("png")

    def test_shared_content_type(self) -> None:
        assert lookup_by_extension("jpg").content_type == "image/jpeg"
        assert lookup_by_extension("jpeg").content_type == "image/jpeg"

    @pytest.mark.parametrize(
        ("extension", "content_type"),
        [
            ("xml", "text/xml"),
            ("mp4", "video/mp4"),
            ("ogg", "audio/ogg"),
            ("rtf", "text/rtf"),
            ("xsl", "application/xslt+xml"),
            ("exe", "application/x-msdownload"),
            ("wmz", "application/x-msmetafile"),
        ],
    )
    def test_repeated_extension_resolves_to_later_content_type(self, extension: str, content_type: str) -> None:
        assert lookup_by_extension(extension).content_type == content_type

    @pytest.mark.parametrize("extension", ["doesnotexist", "", ".", "tar.gz"])
    def test_absent(self, extension: str) -> None:
        assert lookup_by_extension(extension) is None


class TestLookupByContentType:
    def test_css(self) -> None:
        assert lookup_by_content_type("text/css").extension == "css"

    def test_canonical_extension(self) -> None:
        assert lookup_by_content_type("text/plain").extension == "txt"
        assert lookup_by_content_type("image/jpeg").extension == "jpg"
        assert lookup_by_content_type("application/javascript").extension == "js"

    def test_case_insensitive(self) -> None:
        assert lookup_by_content_type("Application/vnd.HandHeld-Entertainment+xml").extension == "zmm"

    def test_binary(self) -> None:
        assert lookup_by_content_type("application/x-compressed").is_binary()
        assert not lookup_by_content_type("text/plain").is_binary()

    def test_indexed_independently_of_extension_winner(self) -> None:
        # mp4 resolves to video/mp4 by extension, application/mp4 keeps its own row
        info = lookup_by_content_type("application/mp4")
        assert info.extension == "mp4"
        assert info.content_type == "application/mp4"

    @pytest.mark.parametrize(
        "content_type",
        ["application/does-not-exist", "something-fake", "", "text/plain; charset=utf-8", " text/plain"],
    )
    def test_absent(self, content_type: str) -> None:
        assert lookup_by_content_type(content_type) is None


class TestBinaryClassification:
    @pytest.mark.parametrize("extension", ["pdf", "png", "zip", "jpg", "mp3", "docx", "woff2"])
    def test_binary_formats(self, extension: str) -> None:
        assert lookup_by_extension(extension).is_binary()

    @pytest.mark.parametrize("extension", ["html", "css", "json", "txt", "js", "svg", "csv", "xml"])
    def test_text_formats(self, extension: str) -> None:
        assert not lookup_by_extension(extension).is_binary()


class TestIdempotence:
    def test_repeated_calls_equal(self) -> None:
        assert lookup_by_filename("a.pdf") == lookup_by_filename("a.pdf")
        assert lookup_by_extension("css") == lookup_by_extension("css")
        assert lookup_by_content_type("text/css") == lookup_by_content_type("text/css")

    def test_shared_record(self) -> None:
        assert lookup_by_extension("pdf") is lookup_by_filename("x.pdf")


class TestPackageExports:
    def test_all(self) -> None:
        for name in minimime.__all__:
            assert hasattr(minimime, name)
