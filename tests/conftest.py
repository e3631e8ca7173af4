"""Shared pytest fixtures for gunghap tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from gunghap.config.settings import GunghapSettings
from gunghap.infrastructure.hangul import HangulDecomposer
from gunghap.services.destiny import DestinyService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config override in the env.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so a stray
    ``gunghap.toml`` on the developer's machine cannot leak into tests.
    """
    monkeypatch.delenv("GUNGHAP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def decomposer() -> HangulDecomposer:
    return HangulDecomposer()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> GunghapSettings:
    """Default settings, isolated from any config file."""
    monkeypatch.delenv("GUNGHAP_CONFIG", raising=False)
    return GunghapSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def service(settings: GunghapSettings) -> DestinyService:
    return DestinyService(settings)
