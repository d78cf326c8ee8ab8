"""End-to-end structural validation of the reference landing page.

The fixture under tests/fixtures/site satisfies every default check.
Each test copies it, breaks one thing, and asserts that exactly that
thing is reported.
"""

from pathlib import Path

import pytest

from sitecheck.application.structural import StructuralValidator
from sitecheck.domain.model.configuration import ValidatorConfig
from sitecheck.domain.model.enums import RunStatus
from sitecheck.infrastructure.adapters.html_document import load_document
from tests.factories import RecordingReporter, copy_fixture_site, patch_document


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """Fresh copy of the reference site; returns its index.html."""
    return copy_fixture_site(tmp_path)


def _validate(index: Path) -> tuple[RunStatus, RecordingReporter]:
    reporter = RecordingReporter()
    status = StructuralValidator(ValidatorConfig(), reporter).run(load_document(index))
    return status, reporter


class TestCleanSite:
    """The untouched fixture."""

    def test_passes_everything(self, site: Path) -> None:
        """No failures, no warnings, every group reported."""
        status, reporter = _validate(site)

        assert status is RunStatus.SUCCESS
        assert reporter.failures == []
        assert reporter.warnings == []
        assert len(reporter.sections) == 11

    def test_idempotent(self, site: Path) -> None:
        """Two runs over the same bytes record the same results."""
        _, first = _validate(site)
        _, second = _validate(site)
        assert first.results == second.results

    def test_dash_inside_script_ignored(self, site: Path) -> None:
        """Script comments are not visible text."""
        assert "—" in site.read_text(encoding="utf-8")
        _, reporter = _validate(site)
        assert "No '—' in visible text" in reporter.passes


class TestSingleDefects:
    """One defect, one reported problem."""

    def test_wrong_lang(self, site: Path) -> None:
        """Wrong html lang is the only failure."""
        patch_document(site, '<html lang="pt-BR">', '<html lang="en">')

        status, reporter = _validate(site)

        assert status is RunStatus.FAILURE
        assert reporter.failures == ["Meta: lang"]

    def test_missing_asset(self, site: Path) -> None:
        """Root-relative reference to an absent file."""
        patch_document(site, '<img src="img/hero.png"', '<img src="/img/missing.png"')

        _, reporter = _validate(site)

        assert reporter.failures == ["Missing asset: /img/missing.png"]

    @pytest.mark.parametrize(
        ("present", "expected"),
        [(False, ["Missing asset: /img/missing.png"]), (True, [])],
    )
    def test_preloaded_asset(self, site: Path, present: bool, expected: list[str]) -> None:
        """link href is checked the same way; an existing file is not reported."""
        stylesheet = '<link rel="stylesheet" href="css/site.css?v=3">'
        preload = '<link rel="preload" href="/img/missing.png" as="image">'
        patch_document(site, stylesheet, f"{stylesheet}\n  {preload}")
        if present:
            (site.parent / "img" / "missing.png").write_bytes(b"\x89PNG")

        _, reporter = _validate(site)

        assert reporter.failures == expected

    def test_lazy_raster_without_dimensions(self, site: Path) -> None:
        """Lazy PNG without width/height fails; lazy SVGs around it do not."""
        patch_document(
            site,
            '<img src="img/bank.svg" alt="Nubank" loading="lazy">',
            '<img src="img/hero.png" alt="Nubank" loading="lazy">',
        )

        _, reporter = _validate(site)

        assert reporter.failures == ["Lazy image without dimensions: hero.png"]

    def test_storage_restore(self, site: Path) -> None:
        """Restoring the language from localStorage fails."""
        patch_document(
            site,
            "let currentLang = 'pt';",
            "let currentLang = localStorage.getItem('zenLang') || 'pt';",
        )

        _, reporter = _validate(site)

        assert "No localStorage language auto-restore on load" in reporter.failures

    def test_deprecated_name(self, site: Path) -> None:
        """Old product name anywhere in the source fails."""
        patch_document(site, "<p>Correspondente Bancário", "<p>ALEAH Correspondente Bancário")

        _, reporter = _validate(site)

        assert reporter.failures == ['No references to old name "Aleah"']


class TestWarningsOnly:
    """Editorial leftovers never fail the run."""

    def test_placeholder_phone(self, site: Path) -> None:
        """Placeholder WhatsApp number warns."""
        patch_document(site, "https://wa.me/5511912345678", "https://wa.me/5511999999999")

        status, reporter = _validate(site)

        assert status is RunStatus.SUCCESS_WITH_WARNINGS
        assert reporter.warnings == ["WhatsApp uses placeholder number (5511999999999)"]

    def test_visible_dash_and_marker(self, site: Path) -> None:
        """Em dash in copy and a FIXME comment both warn."""
        patch_document(
            site,
            "<p>Correspondente Bancário",
            "<!-- FIXME: revisar --><p>Correspondente Bancário —",
        )

        status, reporter = _validate(site)

        assert status is RunStatus.SUCCESS_WITH_WARNINGS
        assert reporter.warnings == [
            "Found TODO/FIXME/HACK/XXX comments in HTML",
            "'—' found in visible text",
        ]

    def test_placeholder_social_link(self, site: Path) -> None:
        """href="#" in the footer warns."""
        patch_document(site, 'href="https://instagram.com/zen"', 'href="#"')

        status, reporter = _validate(site)

        assert status is RunStatus.SUCCESS_WITH_WARNINGS
        assert reporter.warnings == ['1 placeholder social links (href="#") in footer']
