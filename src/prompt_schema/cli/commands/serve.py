"""서버 실행 커맨드"""
from pathlib import Path
from typing import Optional

import typer
import uvicorn
from rich.console import Console
from rich.markup import escape

from prompt_schema.core import Failure, load_config, merge_config
from prompt_schema.logging_config import setup_logging

console = Console()


def _fail(message: str) -> None:
    console.print(f"[bold red]Error: {escape(message)}[/bold red]")
    raise typer.Exit(1)


def serve(
    config_path: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="YAML 설정 파일 경로",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port", "-p",
        help="서버 포트 (설정 파일보다 우선)",
    ),
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="서버 호스트 (설정 파일보다 우선)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="로그 레벨 (설정 파일보다 우선)",
    ),
) -> None:
    """HTTP 서버 시작 (foreground)"""
    from prompt_schema.api import create_app

    config_result = load_config(config_path)
    if isinstance(config_result, Failure):
        _fail(config_result.error.message)

    overrides: dict = {"server": {}, "logging": {}}
    if port is not None:
        overrides["server"]["port"] = port
    if host is not None:
        overrides["server"]["host"] = host
    if log_level is not None:
        overrides["logging"]["level"] = log_level.upper()

    merged = merge_config(config_result.value, overrides)
    if isinstance(merged, Failure):
        _fail(merged.error.message)

    config = merged.value
    setup_logging(config.logging.level)

    console.print(f"[bold blue]Starting server on {escape(config.server.host)}:{config.server.port}[/bold blue]")
    console.print(f"[dim]strict validation: {config.validation.strict}, max body: {config.server.max_body_bytes} bytes[/dim]")

    uvicorn.run(
        create_app(config=config),
        host=config.server.host,
        port=config.server.port,
        log_level=config.logging.level.lower(),
    )
