from __future__ import annotations

import os
import sys

import pytest


def _ensure_project_root_on_path() -> None:
    # When running via the venv's pytest entrypoint, the CWD is not guaranteed to
    # be on sys.path. Ensure the repository root (containing `automata/`) is importable.
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_ensure_project_root_on_path()


@pytest.fixture
def settings_factory(tmp_path):
    """Build colorless settings that never read the developer's .env."""
    from automata.settings import Settings

    def _make(**overrides):
        values = {
            "AUTOMATA_COLOR": False,
            "AUTOMATA_LOG_DIR": tmp_path / "_logs",
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def make_router(settings_factory):
    """Build a started router; keyword args become settings overrides."""
    from automata.tui.router import Router

    def _make(**overrides):
        router = Router.from_settings(settings_factory(**overrides))
        router.start()
        return router

    return _make


@pytest.fixture
def router(make_router):
    return make_router()
