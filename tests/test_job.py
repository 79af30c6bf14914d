"""Tests for the one-shot job, the pandas summary and the settings"""
import pytest

from address_book import job
from address_book.config import Settings, _parse_timeout
from address_book.errors import NetworkError
from address_book.transformations import flatten_batch


class TestFlattenBatch:

    def test_summary_columns(self, batch):
        df = flatten_batch(batch)
        assert list(df.columns) == ["index", "item_id", "name.first", "picture.thumbnail"]
        assert list(df["item_id"]) == [f"person-{i}" for i in range(8)]
        assert list(df["name.first"]) == [r.first_name for r in batch]

    def test_empty_batch(self):
        assert flatten_batch(()).empty


class TestRunPageJob:

    def test_writes_page_and_returns_metrics(self, tmp_path, stub_fetch, capsys):
        metrics = job.run_page_job(Settings(base_dir=tmp_path), fetch=stub_fetch)

        html_path = tmp_path / "data" / "address_list.html"
        assert metrics["status"] == "loaded"
        assert metrics["rows_rendered"] == 8
        assert metrics["html_path"] == str(html_path)
        assert metrics["error"] is None
        assert 'id="person-7"' in html_path.read_text(encoding="utf-8")
        assert "status=loaded" in capsys.readouterr().out

    def test_failed_fetch_writes_empty_page(self, tmp_path):
        def fetch(count):
            raise NetworkError("dns failure")

        metrics = job.run_page_job(Settings(base_dir=tmp_path), fetch=fetch)

        assert metrics["status"] == "failed"
        assert metrics["rows_rendered"] == 0
        assert "dns failure" in metrics["error"]
        assert 'id="address-list"' in (tmp_path / "data" / "address_list.html").read_text(encoding="utf-8")

    def test_main_exit_code(self, monkeypatch):
        monkeypatch.setattr(job, "run_page_job", lambda: {"status": "failed"})
        assert job.main() == 1
        monkeypatch.setattr(job, "run_page_job", lambda: {"status": "loaded"})
        assert job.main() == 0


class TestSettings:

    def test_timeout_parsing(self):
        assert _parse_timeout(None) is None
        assert _parse_timeout("  ") is None
        assert _parse_timeout("15") == 15.0
        with pytest.raises(ValueError):
            _parse_timeout("0")

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RANDOMUSER_API_URL", "http://localhost:9000/api/")
        monkeypatch.setenv("ADDRESS_BOOK_HTTP_TIMEOUT", "4")
        monkeypatch.setenv("ADDRESS_BOOK_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("ADDRESS_BOOK_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.api_url == "http://localhost:9000/api/"
        assert settings.http_timeout == 4.0
        assert settings.base_dir == tmp_path
        assert settings.log_level == "DEBUG"
