"""Clack-style interactive prompts using Rich + simple-term-menu."""

from __future__ import annotations

import sys
from typing import Any, TypeVar

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from anybackend.cli._request import DEFAULT_PROJECT_NAME, validate_project_name
from anybackend.cli._types import Feature, PackageManager

_console = Console()

T = TypeVar("T")

PROJECT_NAME_QUESTION = "Project name:"
PACKAGE_MANAGER_QUESTION = "Install dependencies now?"


def _print_bar() -> None:
    _console.print("[dim]│[/]")


def _clear_lines(n: int) -> None:
    """Move cursor up *n* lines and clear to end of screen."""
    sys.stdout.write(f"\033[{n}A\033[J")
    sys.stdout.flush()


def _answered(question: str, display: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {escape(display)}")
    _print_bar()


def _text(question: str, default: str) -> str:
    """Display a clack-style free-text prompt, asking again until the answer is valid."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()
    shown = 2

    while True:
        _console.print("[dim]│[/]  ", end="")
        raw = input(f"({default}) ")
        shown += 1
        answer = default if raw == "" else raw

        problem = validate_project_name(answer)
        if problem is None:
            break

        _console.print(f"[dim]│[/]  [bold red]{problem}[/]")
        shown += 1

    # Overwrite the question, the bar and every input/error line
    _clear_lines(shown)
    _answered(question, answer.strip())

    return answer.strip()


def _select(question: str, options: list[T], labels: list[str]) -> T:
    """Display a clack-style selection prompt and return the chosen option."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    menu = TerminalMenu(
        labels,
        menu_cursor="│  ● ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
    )
    raw_index = menu.show()

    if raw_index is None:
        raise SystemExit(1)

    index: int = int(raw_index)
    selected = options[index]

    # Overwrite the ◆ question + │ bar that stayed on screen
    _clear_lines(2)

    _console.print(f"[bold green]◇[/]  {question}")
    for i, lbl in enumerate(labels):
        if i == index:
            _console.print(f"[dim]│[/]  [bold green]●[/] {lbl}")
        else:
            _console.print(f"[dim]│[/]    [dim s]{lbl}[/]")
    _print_bar()

    return selected


def _confirm(question: str, default: bool = True) -> bool:
    """Display a clack-style yes/no prompt."""
    _console.print(f"[bold cyan]◆[/]  {question}")
    _print_bar()

    suffix = " [Y/n] " if default else " [y/N] "
    _console.print("[dim]│[/]  ", end="")
    answer = input(suffix).strip().lower()

    result = default if answer == "" else answer in ("y", "yes")

    # Overwrite the ◆ question + │ bar + │ [Y/n] input line
    _clear_lines(3)
    _answered(question, "Yes" if result else "No")

    return result


def prompt_project_name(default: str = DEFAULT_PROJECT_NAME) -> str:
    """Prompt for the project name. Blank answers fall back to *default*."""
    return _text(PROJECT_NAME_QUESTION, default)


def prompt_feature(feature: Feature) -> bool:
    """Ask whether to include an optional feature."""
    return _confirm(feature.question, default=feature.default)


def prompt_package_manager() -> PackageManager:
    """Prompt user to pick an installer, or to skip installation."""
    managers = list(PackageManager)
    labels = [m.label for m in managers]
    return _select(PACKAGE_MANAGER_QUESTION, managers, labels)


def collect_answers(
    project_name: str | None = None,
    features: dict[Feature, bool | None] | None = None,
    package_manager: PackageManager | None = None,
) -> dict[str, Any]:
    """
    Run the questions in order and return a mapping of question name to answer.

    Any value passed in is echoed as already answered instead of being asked.
    """
    features = features or {}

    if project_name is None:
        project_name = prompt_project_name()
    else:
        _answered(PROJECT_NAME_QUESTION, project_name)

    toggles: dict[Feature, bool] = {}
    for feature in Feature:
        given = features.get(feature)
        if given is None:
            toggles[feature] = prompt_feature(feature)
        else:
            _answered(feature.question, "Yes" if given else "No")
            toggles[feature] = given

    if package_manager is None:
        package_manager = prompt_package_manager()
    else:
        _answered(PACKAGE_MANAGER_QUESTION, package_manager.label)

    return {
        "projectName": project_name,
        "includeAuth": toggles[Feature.AUTH],
        "includeFileUpload": toggles[Feature.UPLOAD],
        "includeEnv": toggles[Feature.ENV],
        "packageManager": package_manager,
    }
