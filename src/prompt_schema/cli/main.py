"""Prompt Schema CLI 메인 엔트리"""
import typer
from rich.console import Console

from prompt_schema.cli.commands import serve, validate

console = Console()

app = typer.Typer(
    name="prompt-schema",
    help="Prompt Schema - chat / completion request validation",
    add_completion=False,
)

# 서브커맨드 등록
app.add_typer(validate.app, name="validate")
app.command("serve")(serve.serve)


@app.callback()
def main_callback() -> None:
    """Prompt Schema CLI"""


@app.command()
def version() -> None:
    """버전 정보 출력"""
    from prompt_schema import __version__
    console.print(f"[bold blue]prompt-schema[/bold blue] version [green]{__version__}[/green]")


def cli() -> None:
    """CLI 진입점"""
    app()


if __name__ == "__main__":
    cli()
