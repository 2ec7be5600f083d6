from __future__ import annotations

from pathlib import Path

import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from domain.processors.loader import load_roster
from domain.processors.registry import ProcessorRegistry
from domain.records.store import RecordStore


class FakeClock:
    def __init__(self, start: float = 1_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> RecordStore:
    return RecordStore(clock=clock)


@pytest.fixture
def registry(clock: FakeClock) -> ProcessorRegistry:
    return ProcessorRegistry(clock=clock)


@pytest.fixture
def default_registry(registry: ProcessorRegistry) -> ProcessorRegistry:
    registry.load_defaults(load_roster())
    return registry
