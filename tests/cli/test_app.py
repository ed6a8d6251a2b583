from pathlib import Path

import pytest
from typer.testing import CliRunner

from folio.cli.app import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_site(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FOLIO_PAGINATION__MAX_PER_PAGE", raising=False)
    return tmp_path


def test_rewrite_command():
    result = runner.invoke(app, ["rewrite", "blog.html", "2"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "blog/page/2.html"


def test_rewrite_rejects_first_page():
    result = runner.invoke(app, ["rewrite", "blog.html", "1"])

    assert result.exit_code != 0


def test_preview_command():
    result = runner.invoke(app, ["preview", "--items", "5", "--per-page", "2"])

    assert result.exit_code == 0
    assert "3 page(s)" in result.stdout
    assert "page/2/index.html" in result.stdout
    assert "page/3/index.html" in result.stdout


def test_preview_uses_configured_page_size(isolated_site: Path):
    config_dir = isolated_site / ".folio"
    config_dir.mkdir()
    (config_dir / "config.yml").write_text("pagination:\n  max_per_page: 5\n")

    result = runner.invoke(app, ["preview", "--items", "12"])

    assert result.exit_code == 0
    assert "3 page(s)" in result.stdout


def test_preview_with_no_items_still_renders_one_page():
    result = runner.invoke(app, ["preview", "--items", "0"])

    assert result.exit_code == 0
    assert "1 page(s)" in result.stdout


def test_preview_reports_invalid_page_size():
    result = runner.invoke(app, ["preview", "--per-page", "0"])

    assert result.exit_code == 1
    assert "Invalid max_per_page" in result.stdout


def test_config_command(isolated_site: Path, monkeypatch):
    monkeypatch.setenv("FOLIO_PAGINATION__MAX_PER_PAGE", "4")

    result = runner.invoke(app, ["config", "--site-root", str(isolated_site)])

    assert result.exit_code == 0
    assert "pagination.max_per_page" in result.stdout
    assert "4" in result.stdout


def test_config_command_reports_broken_file(isolated_site: Path):
    config_dir = isolated_site / ".folio"
    config_dir.mkdir()
    (config_dir / "config.yml").write_text("pagination: [oops\n")

    result = runner.invoke(app, ["config"])

    assert result.exit_code == 1
    assert "Error" in result.stdout


def _write_config(site_root: Path, content: str) -> None:
    config_dir = site_root / ".folio"
    config_dir.mkdir()
    (config_dir / "config.yml").write_text(content)


def test_preview_uses_configured_default_provider(isolated_site: Path):
    _write_config(isolated_site, "pagination:\n  default_provider: data.missing\n")

    result = runner.invoke(app, ["preview", "--items", "3", "--site-root", str(isolated_site)])

    assert result.exit_code == 1
    assert "Data provider 'missing' not found" in result.stdout


def test_preview_with_unmatched_default_provider_has_no_pages(isolated_site: Path):
    _write_config(isolated_site, "pagination:\n  default_provider: posts\n")

    result = runner.invoke(app, ["preview", "--items", "3"])

    assert result.exit_code == 0
    assert "0 page(s)" in result.stdout
