"""Typer CLI application for anybackend."""

from __future__ import annotations

import logging
from pathlib import Path
import subprocess
from typing import Annotated

from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, BadParameter, Exit, Option, Typer

from anybackend.cli import _style
from anybackend.cli._installer import install_dependencies
from anybackend.cli._prompts import collect_answers
from anybackend.cli._renderer import render_project
from anybackend.cli._request import DEFAULT_PORT, GenerationRequest, validate_project_name
from anybackend.cli._types import Feature, PackageManager

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = _style.console

_FILE_DESCRIPTIONS: dict[str, str] = {
    "package.json": "dependencies and scripts",
    "server.js": "entry point",
    ".env": "Mongo URI, port and secrets",
    ".gitignore": "version control exclusions",
    "config/db.js": "MongoDB connection",
    "models/User.js": "User model",
    "controllers/userController.js": "User CRUD handlers",
    "routes/userRoutes.js": "/api/users",
    "controllers/authController.js": "register and login",
    "routes/authRoutes.js": "/api/auth",
    "routes/uploadRoutes.js": "/api/upload",
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_path=False)],
        force=True,
    )


def _project_name_callback(value: str | None) -> str | None:
    if value is None:
        return None
    problem = validate_project_name(value)
    if problem is not None:
        raise BadParameter(problem)
    return value.strip()


def _ensure_absent(project_dir: Path, project_name: str) -> None:
    if project_dir.exists():
        name = escape(project_name)
        _console.print(f"{_style.error('Error:')} Directory '{name}' already exists.")
        raise Exit(code=1)


@app.command()
def create(
    project_name: Annotated[
        str | None,
        Argument(
            help="Name for the new project directory",
            callback=_project_name_callback,
            show_default=False,
        ),
    ] = None,
    auth: Annotated[
        bool | None,
        Option("--auth/--no-auth", help="Include JWT register/login routes"),
    ] = None,
    upload: Annotated[
        bool | None,
        Option("--upload/--no-upload", help="Include a Multer file upload route"),
    ] = None,
    env: Annotated[
        bool | None,
        Option("--env/--no-env", help="Write a .env file and load it with dotenv"),
    ] = None,
    install: Annotated[
        PackageManager | None,
        Option("--install", "-i", help="Install dependencies with this package manager"),
    ] = None,
    mongo_uri: Annotated[
        str | None,
        Option(
            "--mongo-uri",
            envvar="ANYBACKEND_MONGO_URI",
            help="MongoDB URI. Defaults to a local database named after the project.",
            show_default=False,
        ),
    ] = None,
    port: Annotated[
        int,
        Option("--port", "-p", envvar="ANYBACKEND_PORT", min=1, max=65535, help="Server port"),
    ] = DEFAULT_PORT,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Show debug logging")] = False,
) -> None:
    """Create a new Express + MongoDB backend project."""
    _configure_logging(verbose)

    if project_name is not None:
        _ensure_absent(Path.cwd() / project_name, project_name)

    _style.show_banner()

    # Interactive prompts for missing options
    answers = collect_answers(
        project_name=project_name,
        features={Feature.AUTH: auth, Feature.UPLOAD: upload, Feature.ENV: env},
        package_manager=install,
    )

    request = GenerationRequest(
        project_name=answers["projectName"],
        include_auth=answers["includeAuth"],
        include_upload=answers["includeFileUpload"],
        include_env=answers["includeEnv"],
        mongo_uri=mongo_uri,
        port=port,
        package_manager=answers["packageManager"],
    )
    project_dir = Path.cwd() / request.project_name
    _ensure_absent(project_dir, request.project_name)

    # Render
    _console.print(f"[bold green]◇[/]  {_style.step('Creating scalable folder structure...')}")

    created = render_project(project_dir, request)

    for name in created:
        desc = _FILE_DESCRIPTIONS.get(name, "")
        desc_str = f" [dim]— {desc}[/]" if desc else ""
        _console.print(f"[dim]│[/]  {name}{desc_str}")

    # Install
    manager = request.package_manager
    if manager is not PackageManager.SKIP:
        _console.print("[dim]│[/]")
        installing = _style.step(f"Installing dependencies with {manager.value}...")
        _console.print(f"[bold green]◇[/]  {installing}")
        try:
            install_dependencies(project_dir, manager)
        except subprocess.CalledProcessError as exc:
            command = " ".join(manager.command)
            _console.print(
                f"{_style.error('Error:')} '{command}' exited with status {exc.returncode}."
            )
            raise Exit(code=1) from None
        except FileNotFoundError:
            _console.print(f"{_style.error('Error:')} '{manager.value}' was not found on PATH.")
            raise Exit(code=1) from None

    _style.show_success(request.project_name, request.port, request.package_manager)
