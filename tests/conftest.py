# Shared fixtures for engine and API tests.

from __future__ import annotations

import pytest

from collapsi.engine.core import CollapsiEngine
from collapsi.events import event_bus
from collapsi.factory import quickstart
from collapsi.models.state import GameState


@pytest.fixture()
def state() -> GameState:
    # jokers-corners: red on (0, 0), blue on (0, 3)
    return quickstart("jokers-corners")


@pytest.fixture()
def engine(state: GameState) -> CollapsiEngine:
    return CollapsiEngine(state, game_id="test")


@pytest.fixture()
def captured():
    """Collect events of the requested types for the duration of a test."""
    seen: list = []
    subs: list = []

    def watch(*event_types):
        for et in event_types:
            event_bus.subscribe(et, seen.append)
            subs.append(et)
        return seen

    yield watch
    for et in subs:
        event_bus.unsubscribe(et, seen.append)
