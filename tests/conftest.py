"""Shared test fixtures: default config, in-memory filesystem, plugin."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from gluadoc.config import PluginConfig, Settings
from gluadoc.plugin import Plugin
from gluadoc.scope.fakes import FakeFileSystem

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures" / "addon"

# The end-to-end entity: folder-scoped, literal base, one networked field.
MY_ENT_INIT = (
    'ENT.Base = "base_anim"\n'
    "\n"
    "function ENT:SetupDataTables()\n"
    '\tself:NetworkVar("Float", 0, "Speed")\n'
    "end\n"
)
MY_ENT_DIR = "/addon/lua/entities/my_ent"


@pytest.fixture
def config() -> PluginConfig:
    return PluginConfig()


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file in the working directory."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem({f"{MY_ENT_DIR}/init.lua": MY_ENT_INIT})


@pytest.fixture
def plugin(
    settings: Settings, config: PluginConfig, fake_fs: FakeFileSystem
) -> Plugin:
    return Plugin(settings, config=config, filesystem=fake_fs)


@pytest.fixture
def fixture_dir() -> Path:
    return FIXTURE_DIR


@pytest.fixture
def scan_log() -> Generator[logging.Logger, None, None]:
    """The scan logger with no handlers left over from other tests."""
    log = logging.getLogger("gluadoc.scan")
    log.handlers.clear()
    yield log
    for handler in log.handlers:
        handler.close()
    log.handlers.clear()


@pytest.fixture
def my_ent_text() -> str:
    return MY_ENT_INIT


@pytest.fixture
def my_ent_uri() -> str:
    return f"file://{MY_ENT_DIR}/init.lua"
