"""Tests for appcenter-upload CLI helpers."""
import logging
import os
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from rich.console import Console

from appcenter_uploader import cli
from appcenter_uploader.cli import (
    CLIError,
    _build_parser,
    _build_request,
    _load_env_file,
    _resolve_config,
    _setup_logging,
    run_cli,
)
from appcenter_uploader.console import render_upload_request, upload_request_rows
from appcenter_uploader.models import SymbolType, UploadRequest


def test_load_env_file(tmp_path, monkeypatch):
    env_path = tmp_path / ".env"
    env_path.write_text(
        "\n".join(
            [
                "# comment",
                "APPCENTER_API_TOKEN='abc123'",
                "export APPCENTER_API_URL=http://localhost:8080/",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.delenv("APPCENTER_API_TOKEN", raising=False)
    monkeypatch.delenv("APPCENTER_API_URL", raising=False)

    _load_env_file(env_path)

    assert os.environ["APPCENTER_API_TOKEN"] == "abc123"
    assert os.environ["APPCENTER_API_URL"] == "http://localhost:8080/"


def test_load_env_file_missing(tmp_path):
    with pytest.raises(CLIError, match="env file not found"):
        _load_env_file(tmp_path / "missing.env")


def test_resolve_config_requires_token(monkeypatch):
    monkeypatch.delenv("APPCENTER_API_TOKEN", raising=False)
    with pytest.raises(CLIError, match="APPCENTER_API_TOKEN"):
        _resolve_config(None, 60)


def test_resolve_config_prefers_argument(monkeypatch):
    monkeypatch.setenv("APPCENTER_API_TOKEN", "tok")
    monkeypatch.setenv("APPCENTER_API_URL", "http://env/")

    assert _resolve_config(None, 30).api_url == "http://env/"
    assert _resolve_config("http://arg/", 30).api_url == "http://arg/"


def test_build_request_with_symbols():
    args = _build_parser().parse_args(
        ["owner", "app", "1.0", "--symbols", "out/app.dSYM.zip", "--symbol-type", "apple", "-g", "QA"]
    )

    request = _build_request(args)

    assert request.symbol_upload_request.symbol_type is SymbolType.APPLE
    assert request.symbol_upload_request.file_name == "app.dSYM.zip"
    assert request.symbol_upload_request.version == "1.0"
    assert request.destination_groups == ("QA",)


def test_build_request_symbols_need_type():
    args = _build_parser().parse_args(["owner", "app", "1.0", "--symbols", "x.zip"])
    with pytest.raises(CLIError, match="--symbol-type"):
        _build_request(args)


def test_setup_logging_defaults_to_silent():
    mode = _setup_logging(debug=False, silent=False, log_level=None)
    assert mode == "silent"
    logging.disable(logging.NOTSET)


def test_setup_logging_debug_mode():
    mode = _setup_logging(debug=True, silent=False, log_level=None)
    assert mode == "DEBUG"
    assert logging.getLogger().isEnabledFor(logging.DEBUG) is True
    logging.disable(logging.NOTSET)


def test_run_cli_returns_task_exit_code(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("APPCENTER_API_TOKEN", "tok")
    runner = AsyncMock(return_value=1)
    monkeypatch.setattr(cli, "_run_create_upload_resource", runner)

    code = run_cli(["owner", "app", "1.0", "--silent"])

    assert code == 1
    config, request = runner.await_args.args
    assert config.api_token == "tok"
    assert request.owner_name == "owner"
    logging.disable(logging.NOTSET)


def test_run_cli_missing_token(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("APPCENTER_API_TOKEN", raising=False)

    assert run_cli(["owner", "app", "1.0", "--silent"]) == 1
    assert "APPCENTER_API_TOKEN" in capsys.readouterr().err
    logging.disable(logging.NOTSET)


def test_upload_request_rows_masks_token():
    request = (
        UploadRequest.builder("o", "a", "1.0")
        .set_token("abcdefghijklmnop")
        .build()
    )

    assert upload_request_rows(request)["token"] == "abcd...mnop"
    assert upload_request_rows(request, show_secrets=True)["token"] == "abcdefghijklmnop"


def test_render_upload_request():
    target = Console(record=True, width=120)
    request = UploadRequest.builder("o", "a", "1.0").set_upload_id("U1").build()

    render_upload_request(request, target=target)

    assert "U1" in target.export_text()
