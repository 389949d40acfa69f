"""요청 문서 검증 커맨드"""
import json
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from prompt_schema.core import (
    Success, Failure, RequestKind, parse_request, describe_error,
)

app = typer.Typer(help="요청 문서 검증")
console = Console()
err_console = Console(stderr=True)


def _read_source(source: str) -> bytes:
    """파일 또는 stdin('-') 읽기"""
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        err_console.print(f"[bold red]File not found: {source}[/bold red]")
        raise typer.Exit(2)
    return path.read_bytes()


def _run(kind: RequestKind, source: str, strict: bool, as_json: bool) -> None:
    result = parse_request(kind, _read_source(source), strict=strict)

    match result:
        case Success(document):
            if as_json:
                # rich 마크업 해석 없이 그대로 출력
                typer.echo(json.dumps(document.to_dict(), ensure_ascii=False, indent=2))
            else:
                console.print(f"[bold green]valid {kind}[/bold green] (version={escape(document.version)}, engine={escape(document.engine)})", highlight=False)
        case Failure(error):
            err_console.print(f"[bold red]invalid {kind}:[/bold red] {escape(describe_error(error))}", highlight=False)
            raise typer.Exit(1)


@app.command("chat")
def validate_chat(
    source: str = typer.Argument(..., help="JSON 파일 경로 ('-' 는 stdin)"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="의미 검증 적용"),
    as_json: bool = typer.Option(False, "--json", help="정규화된 문서를 JSON 으로 출력"),
) -> None:
    """Chat 요청 문서 검증"""
    _run("chat", source, strict, as_json)


@app.command("completion")
def validate_completion(
    source: str = typer.Argument(..., help="JSON 파일 경로 ('-' 는 stdin)"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="의미 검증 적용"),
    as_json: bool = typer.Option(False, "--json", help="정규화된 문서를 JSON 으로 출력"),
) -> None:
    """Completion 요청 문서 검증"""
    _run("completion", source, strict, as_json)
