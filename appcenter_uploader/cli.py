"""Command line interface for appcenter_uploader."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.logging import RichHandler

from . import __version__
from .console import ConsoleSink, render_configuration_summary, render_upload_request
from .exceptions import AppCenterError
from .models import SymbolType, SymbolUploadBeginRequest, UploadConfig, UploadRequest
from .services import AppCenterServiceFactory, HTTPAPIClient
from .tasks import CreateUploadResourceTask

DEFAULT_API_URL = "https://api.appcenter.ms/"

logger = logging.getLogger(__name__)


class CLIError(RuntimeError):
    """Raised when CLI validation/execution fails."""


def _setup_logging(debug: bool, silent: bool, log_level: Optional[str]) -> str:
    """
    Configure logging.

    Default behavior is silent unless --debug or --log-level is provided.
    Returns a string describing effective mode.
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    logging.disable(logging.NOTSET)

    if silent or (not debug and not log_level):
        logging.disable(logging.CRITICAL)
        root_logger.setLevel(logging.CRITICAL + 1)
        return "silent"

    if debug:
        level = logging.DEBUG
    else:
        level = getattr(logging, log_level.upper(), logging.INFO)

    handler = RichHandler(
        rich_tracebacks=True,
        markup=False,
        show_time=False,
        show_path=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
    return logging.getLevelName(level)


def _strip_optional_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
        return value[1:-1]
    return value


def _load_env_file(path: Path, override: bool = False) -> None:
    if not path.exists():
        raise CLIError(f"env file not found: {path}")
    if not path.is_file():
        raise CLIError(f"env path is not a file: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CLIError(f"could not read env file {path}: {exc}") from exc

    for raw_line in content.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export ") :].strip()
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        if not key:
            continue

        value = _strip_optional_quotes(value.strip())
        if override or key not in os.environ:
            os.environ[key] = value


def _resolve_default_env_file() -> Optional[Path]:
    default_env = Path(".env")
    return default_env if default_env.exists() and default_env.is_file() else None


def _resolve_config(api_url: Optional[str], timeout: int) -> UploadConfig:
    api_token = os.getenv("APPCENTER_API_TOKEN")
    if not api_token:
        raise CLIError("APPCENTER_API_TOKEN environment variable is not set")
    return UploadConfig(
        api_token=api_token,
        api_url=api_url or os.getenv("APPCENTER_API_URL") or DEFAULT_API_URL,
        timeout=timeout,
    )


def _build_request(args: argparse.Namespace) -> UploadRequest:
    symbol_request = None
    if args.symbols is not None:
        if not args.symbol_type:
            raise CLIError("--symbol-type is required with --symbols")
        try:
            symbol_type = SymbolType.parse(args.symbol_type)
        except ValueError as exc:
            raise CLIError(str(exc)) from exc
        symbol_request = SymbolUploadBeginRequest(
            symbol_type=symbol_type,
            file_name=Path(args.symbols).name,
            build=args.build_number,
            version=args.build_version,
        )

    try:
        return (
            UploadRequest.builder(args.owner, args.app, args.build_version)
            .set_path_to_app(str(args.app_path) if args.app_path else None)
            .set_path_to_debug_symbols(str(args.symbols) if args.symbols else None)
            .set_release_notes(args.release_notes)
            .set_destination_groups(args.group or ())
            .set_symbol_upload_request(symbol_request)
            .build()
        )
    except ValueError as exc:
        raise CLIError(str(exc)) from exc


async def _run_create_upload_resource(
    config: UploadConfig,
    request: UploadRequest,
    show_secrets: bool,
) -> int:
    async with HTTPAPIClient(config) as api_client:
        task = CreateUploadResourceTask(ConsoleSink(), AppCenterServiceFactory(api_client))
        try:
            result = await task.execute(request)
        except AppCenterError as exc:
            logger.debug("Upload resource creation failed", exc_info=True)
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    render_upload_request(result, show_secrets=show_secrets)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="appcenter-upload",
        description="Create App Center upload resources for a release and its debug symbols.",
    )
    parser.add_argument("owner", nargs="?", help="App owner (user or organization) name")
    parser.add_argument("app", nargs="?", help="App name")
    parser.add_argument("build_version", nargs="?", help="Release build version")
    parser.add_argument("--app-path", type=Path, default=None, help="Path to the app artifact")
    parser.add_argument("--build-number", default=None, help="Release build number")
    parser.add_argument("--symbols", type=Path, default=None, help="Path to debug symbols")
    parser.add_argument(
        "--symbol-type",
        default=None,
        help="Debug symbol type (" + ", ".join(t.value for t in SymbolType) + ")",
    )
    parser.add_argument("--release-notes", default=None, help="Release notes text")
    parser.add_argument(
        "-g",
        "--group",
        action="append",
        default=None,
        help="Distribution group (repeatable)",
    )
    parser.add_argument(
        "--api-url",
        default=None,
        help=f"App Center API URL (default from APPCENTER_API_URL or {DEFAULT_API_URL})",
    )
    parser.add_argument("--timeout", type=int, default=60, help="HTTP timeout in seconds")
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print the upload token unmasked",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load environment variables from this .env file",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    parser.add_argument("--silent", action="store_true", help="Only print errors")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Explicit log level (DEBUG/INFO/WARNING/ERROR)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"appcenter-upload {__version__}",
    )
    return parser


def run_cli(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    used_env_file = args.env_file or _resolve_default_env_file()
    if used_env_file is not None:
        try:
            _load_env_file(Path(used_env_file))
        except CLIError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 1

    effective_log_mode = _setup_logging(
        debug=args.debug,
        silent=args.silent,
        log_level=args.log_level or os.getenv("LOG_LEVEL"),
    )

    if not (args.owner and args.app and args.build_version):
        parser.print_help()
        return 0

    try:
        config = _resolve_config(args.api_url, args.timeout)
        request = _build_request(args)
    except CLIError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if not args.silent:
        render_configuration_summary(
            {
                "Owner": request.owner_name,
                "App": request.app_name,
                "Build Version": request.build_version,
                "Symbols": request.path_to_debug_symbols or "-",
                "Symbol Type": (
                    request.symbol_upload_request.symbol_type.value
                    if request.symbol_upload_request
                    else "-"
                ),
                "API URL": config.api_url,
                "Env File": str(used_env_file) if used_env_file else "-",
                "Logging": effective_log_mode,
            }
        )

    try:
        return asyncio.run(
            _run_create_upload_resource(config, request, show_secrets=args.show_secrets)
        )
    except KeyboardInterrupt:
        print("Cancelled.", file=sys.stderr)
        return 130


def main() -> None:
    raise SystemExit(run_cli())


if __name__ == "__main__":
    main()
