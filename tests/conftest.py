"""Shared fixtures for the procgen test suite."""

from __future__ import annotations

import logging

import pytest

from procgen.core.models import GenContext, SectorDef
from procgen.systems.sector import get_sector


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """setup_logging() replaces root handlers; put pytest's back afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def ctx() -> GenContext:
    return GenContext(global_seed=42, progression_layer_id="v0")


@pytest.fixture
def origin_sector(ctx: GenContext) -> SectorDef:
    return get_sector((0, 0, 0), ctx)
