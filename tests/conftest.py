import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pytest

from procworld.config import WorldConfig


class RecordingPlacer:
    def __init__(self):
        self.placed = []
        self.removed = []
        self.live = {}

    def place(self, entity):
        assert id(entity) not in self.live, "entity placed twice"
        self.placed.append(entity)
        self.live[id(entity)] = entity

    def remove(self, entity):
        assert id(entity) in self.live, "removing an entity that is not placed"
        self.removed.append(entity)
        del self.live[id(entity)]


@pytest.fixture
def placer():
    return RecordingPlacer()


@pytest.fixture
def config():
    return WorldConfig(seed=42, window_width=1024, window_height=768)
