"""Console styling: colored text, banner and the closing summary."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

import anybackend
from anybackend.cli._types import PackageManager

console = Console()


def prompt(text: str) -> str:
    return f"[bold cyan]{text}[/]"


def error(text: str) -> str:
    return f"[bold red]{text}[/]"


def info(text: str) -> str:
    return f"[dim]{text}[/]"


def step(text: str) -> str:
    return f"[yellow]{text}[/]"


def success(text: str) -> str:
    return f"[bold green]{text}[/]"


def show_banner() -> None:
    console.print()
    console.print(f"{prompt('●')}  anybackend v{anybackend.__version__}")
    console.print(info("│  Create a modern Express + MongoDB backend effortlessly."))
    console.print(info("│"))


def show_success(project_name: str, port: int, manager: PackageManager) -> None:
    """Print the next steps for a freshly generated project."""
    runner = "npm" if manager is PackageManager.SKIP else manager.value

    console.print(info("│"))
    console.print(f"{success('◇')}  Project {escape(repr(project_name))} is ready!")
    console.print(info("│"))
    console.print(f"{prompt('●')}  Next steps:")
    console.print(f"{info('│')}  cd {escape(project_name)}")
    if manager is PackageManager.SKIP:
        console.print(f"{info('│')}  npm install")
    console.print(f"{info('│')}  {runner} run dev")
    console.print(info("│"))
    console.print(f"{info('│')}  Then open [bold blue]http://localhost:{port}[/]")
    console.print()
