"""Tests for the archive-client command line interface."""

import json

import pytest
from click.testing import CliRunner

from archive_client.cli import cli

BASE_URL = "https://archive.example.com/api"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def archive_env(monkeypatch):
    monkeypatch.setenv("ARCHIVE_SCOPE", "https://archive.example.com/.default")
    monkeypatch.setenv("ARCHIVE_BASE_URL", BASE_URL)
    monkeypatch.setenv("ARCHIVE_ACCESS_TOKEN", "cli-token")
    monkeypatch.delenv("ARCHIVE_TIMEOUT", raising=False)


class TestFileExtensionCommand:
    def test_classifies_filenames(self, runner):
        result = runner.invoke(cli, ["file-extension", "report.pdf", "scan.TIF"])

        assert result.exit_code == 0
        assert "PDF" in result.output
        assert "convert" in result.output
        assert "TIF" in result.output
        assert "accept" in result.output

    def test_requires_filename(self, runner):
        result = runner.invoke(cli, ["file-extension"])

        assert result.exit_code != 0

    def test_not_available_for_vfk(self, runner):
        result = runner.invoke(cli, ["--variant", "vfk", "file-extension", "a.pdf"])

        assert result.exit_code == 1
        assert "not available" in result.output


class TestCallCommand:
    def test_posts_envelope(self, runner, archive_env, httpx_mock):
        httpx_mock.add_response(
            method="POST", url=f"{BASE_URL}/archive", json={"id": 1}
        )

        result = runner.invoke(
            cli,
            ["call", "CaseService", "GetCases", "--parameter", '{"Title": "x"}'],
        )

        assert result.exit_code == 0, result.output
        assert '"id": 1' in result.output
        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer cli-token"
        assert json.loads(request.content) == {
            "service": "CaseService",
            "method": "GetCases",
            "parameter": {"Title": "x"},
        }

    def test_remote_error_exits_with_message(self, runner, archive_env, httpx_mock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/archive",
            status_code=400,
            json={"message": "bad", "data": {"x": 1}},
        )

        result = runner.invoke(cli, ["call", "CaseService", "GetCases"])

        assert result.exit_code == 1
        assert "HTTP 400" in result.output
        assert "bad" in result.output

    def test_invalid_parameter_json(self, runner, archive_env):
        result = runner.invoke(
            cli, ["call", "CaseService", "GetCases", "--parameter", "{not json"]
        )

        assert result.exit_code == 1
        assert "not valid JSON" in result.output

    def test_missing_token(self, runner, archive_env, monkeypatch):
        monkeypatch.delenv("ARCHIVE_ACCESS_TOKEN")

        result = runner.invoke(cli, ["call", "CaseService", "GetCases"])

        assert result.exit_code == 1
        assert "access token is required" in result.output

    def test_missing_configuration(self, runner, archive_env, monkeypatch):
        monkeypatch.delenv("ARCHIVE_BASE_URL")

        result = runner.invoke(cli, ["call", "CaseService", "GetCases"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestSyncEnterpriseCommand:
    def test_posts_orgnr(self, runner, archive_env, httpx_mock):
        httpx_mock.add_response(
            method="POST", url=f"{BASE_URL}/syncEnterprise", json={"recno": 9}
        )

        result = runner.invoke(
            cli, ["--variant", "vfk", "sync-enterprise", "987654321"]
        )

        assert result.exit_code == 0, result.output
        assert '"recno": 9' in result.output
        assert json.loads(httpx_mock.get_request().content) == {"orgnr": "987654321"}
