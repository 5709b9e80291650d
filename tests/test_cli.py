"""Tests for the Typer CLI."""

import hashlib
import json

from typer.testing import CliRunner

from cli.main import app
from core.config import read_user_env_vars

runner = CliRunner()

TEST_HASH = hashlib.md5(b"test@example.com").hexdigest()


def test_url_prints_default_link() -> None:
    result = runner.invoke(app, ["url", "Test@Example.com"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        f"http://www.gravatar.com/avatar/1/{TEST_HASH}?default=404&requireType=false&size=200"
    )


def test_url_applies_flags_and_extras() -> None:
    result = runner.invoke(
        app,
        ["url", "test@example.com", "--size", "80", "--secure", "--require-type", "-e", "rating=pg"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == (
        f"https://secure.gravatar.com/avatar/1/{TEST_HASH}.jpg"
        "?default=404&requireType=true&size=80&secure=true&rating=pg"
    )


def test_url_json_output() -> None:
    result = runner.invoke(app, ["url", "a@b.co", "c@d.co", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [item["email"] for item in payload] == ["a@b.co", "c@d.co"]
    assert payload[0]["hash"] == hashlib.md5(b"a@b.co").hexdigest()


def test_url_writes_output_file(tmp_path) -> None:
    output = tmp_path / "links.json"
    result = runner.invoke(app, ["url", "a@b.co", "--output", str(output)])
    assert result.exit_code == 0, result.output
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload[0]["email"] == "a@b.co"


def test_url_table_output() -> None:
    result = runner.invoke(app, ["url", "a@b.co", "--table"])
    assert result.exit_code == 0, result.output
    assert "Avatar Links" in result.output
    assert "a@b.co" in result.output


def test_url_rejects_empty_email() -> None:
    result = runner.invoke(app, ["url", "   "])
    assert result.exit_code == 2


def test_url_rejects_malformed_extra() -> None:
    result = runner.invoke(app, ["url", "a@b.co", "--extra", "rating"])
    assert result.exit_code == 2


def test_hash_command() -> None:
    result = runner.invoke(app, ["hash", " TEST@example.com "])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == TEST_HASH


def test_config_show_lists_settings() -> None:
    result = runner.invoke(app, ["config", "show"])
    assert result.exit_code == 0, result.output
    assert "service_domain" in result.output


def test_config_set_writes_user_env(user_config_home) -> None:
    result = runner.invoke(app, ["config", "set", "default_size=64", "SECURE=true"])
    assert result.exit_code == 0, result.output
    assert read_user_env_vars() == {
        "AVATAR_LINK_DEFAULT_SIZE": "64",
        "AVATAR_LINK_SECURE": "true",
    }


def test_config_set_rejects_invalid_values(user_config_home) -> None:
    assert runner.invoke(app, ["config", "set", "default_size=0"]).exit_code == 2
    assert runner.invoke(app, ["config", "set", "nope=1"]).exit_code == 2
    assert runner.invoke(app, ["config", "set", "default_size"]).exit_code == 2
    assert read_user_env_vars() == {}


def test_invalid_env_setting_is_reported_as_usage_error(monkeypatch) -> None:
    monkeypatch.setenv("AVATAR_LINK_DEFAULT_SIZE", "0")
    result = runner.invoke(app, ["hash", "a@b.co"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
