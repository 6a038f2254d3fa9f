"""Shared fixtures for the anybackend test suite."""

from pathlib import Path

import pytest

from anybackend.cli._request import GenerationRequest


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ANYBACKEND_MONGO_URI", raising=False)
    monkeypatch.delenv("ANYBACKEND_PORT", raising=False)
    return tmp_path


@pytest.fixture
def minimal_request() -> GenerationRequest:
    return GenerationRequest(
        project_name="demo",
        include_auth=False,
        include_upload=False,
        include_env=False,
    )


@pytest.fixture
def full_request() -> GenerationRequest:
    return GenerationRequest(
        project_name="demo",
        include_auth=True,
        include_upload=True,
        include_env=True,
    )
