"""Tests for structural/filesystem_checks.py."""

from pathlib import Path

from sitecheck.application.structural.filesystem_checks import (
    AssetFilesCheck,
    InternalLinksCheck,
    local_asset_references,
)
from sitecheck.domain.model.configuration import ValidatorConfig
from tests.factories import RecordingReporter, make_document


def _touch(root: Path, *relative: str) -> None:
    for rel in relative:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("x", encoding="utf-8")


class TestLocalAssetReferences:
    """Tests for local_asset_references()."""

    def test_sources_in_first_seen_order(self) -> None:
        """img, then link, then CSS url(), without duplicates."""
        document = make_document(
            body='<img src="img/a.png"><img src="img/a.png">',
            head=(
                '<link rel="stylesheet" href="css/site.css">'
                "<style>.hero { background: url('img/bg.svg'); }</style>"
            ),
        )
        assert local_asset_references(document) == ("img/a.png", "css/site.css", "img/bg.svg")

    def test_remote_and_inline_skipped(self) -> None:
        """Schemes, protocol-relative and data: references are not local."""
        document = make_document(
            body='<img src="data:image/png;base64,AAAA"><img src="https://cdn.example.com/x.png">',
            head=(
                '<link rel="preconnect" href="//fonts.gstatic.com">'
                '<style>.a { background: url("data:image/svg+xml;utf8,<svg/>"); }</style>'
            ),
        )
        assert local_asset_references(document) == ()


class TestAssetFilesCheck:
    """Tests for AssetFilesCheck."""

    def test_all_assets_exist(self, tmp_path: Path) -> None:
        """Single aggregate pass with the asset count."""
        _touch(tmp_path, "img/a.png", "css/site.css")
        document = make_document(
            body='<img src="img/a.png" alt="">',
            head='<link rel="stylesheet" href="/css/site.css?v=3#x">',
            path=tmp_path / "index.html",
        )
        reporter = RecordingReporter()

        AssetFilesCheck().run(document, ValidatorConfig(), reporter)

        assert reporter.passes == ["All 2 local assets exist on disk"]

    def test_missing_asset(self, tmp_path: Path) -> None:
        """Each missing path is one failure naming the reference."""
        _touch(tmp_path, "img/a.png")
        document = make_document(
            body='<img src="img/a.png" alt=""><img src="/img/missing.png" alt="">',
            path=tmp_path / "index.html",
        )
        reporter = RecordingReporter()

        AssetFilesCheck().run(document, ValidatorConfig(), reporter)

        assert reporter.failures == ["Missing asset: /img/missing.png"]
        assert reporter.passes == []


class TestInternalLinksCheck:
    """Tests for InternalLinksCheck."""

    def test_anchors_and_links_resolve(self, tmp_path: Path) -> None:
        """Valid anchors and relative links: two passes."""
        _touch(tmp_path, "privacidade/index.html", "legal/termos.pdf")
        body = (
            '<section id="sobre"></section>'
            '<a href="#sobre">Sobre</a><a href="#">Topo</a>'
            '<a href="privacidade/">Privacidade</a><a href="legal/termos.pdf">Termos</a>'
            '<a href="mailto:oi@zen.example.com">Email</a><a href="tel:+5511912345678">Tel</a>'
            '<a href="https://wa.me/5511912345678">WhatsApp</a>'
        )
        reporter = RecordingReporter()

        document = make_document(body, path=tmp_path / "index.html")
        InternalLinksCheck().run(document, ValidatorConfig(), reporter)

        assert reporter.failures == []
        assert reporter.passes == [
            "All anchor links resolve to existing IDs",
            "All relative links point to existing files",
        ]

    def test_broken_anchor(self, tmp_path: Path) -> None:
        """Anchor without matching id fails; relative links still pass."""
        reporter = RecordingReporter()
        InternalLinksCheck().run(
            make_document('<a href="#precos">Preços</a>', path=tmp_path / "index.html"),
            ValidatorConfig(),
            reporter,
        )
        assert reporter.failures == ["Broken anchor: #precos"]
        assert reporter.passes == ["All relative links point to existing files"]

    def test_existing_directory_without_index(self, tmp_path: Path) -> None:
        """A directory link passes whether or not it holds index.html."""
        (tmp_path / "legal").mkdir()
        (tmp_path / "legal" / "a.pdf").write_bytes(b"%PDF")
        reporter = RecordingReporter()
        InternalLinksCheck().run(
            make_document('<a href="legal/">Legal</a>', path=tmp_path / "index.html"),
            ValidatorConfig(),
            reporter,
        )
        assert reporter.failures == []
        assert "All relative links point to existing files" in reporter.passes

    def test_missing_directory_is_broken(self, tmp_path: Path) -> None:
        """A link to a directory that does not exist fails."""
        reporter = RecordingReporter()
        InternalLinksCheck().run(
            make_document('<a href="blog/">Blog</a>', path=tmp_path / "index.html"),
            ValidatorConfig(),
            reporter,
        )
        assert reporter.failures == ["Broken relative link: blog/"]
