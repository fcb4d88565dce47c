"""Pytest configuration and fixtures."""
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from storerota.models.availability import Availability
from storerota.models.shift import Day, SlotType
from storerota.models.worker import Worker


@pytest.fixture
def locations():
    """Two stores, first has priority."""
    return ["store-a", "store-b"]


@pytest.fixture
def sample_availability():
    """A small week: busy Monday morning, thin Sunday evening."""
    return Availability.from_mapping({
        Day.MONDAY: {
            SlotType.MORNING: ["Alice", "Bob", "Charlie", "Diana", "Eve"],
            SlotType.MIDDAY: ["Alice", "Bob"],
        },
        Day.TUESDAY: {
            SlotType.MORNING: ["Alice", "Bob", "Charlie"],
            SlotType.EVENING: ["Eve"],
        },
        Day.SUNDAY: {
            SlotType.EVENING: ["Diana"],
        },
    })


@pytest.fixture
def sample_workers():
    """Worker records matching sample_availability."""
    return [
        Worker(id="E1", name="Alice", salary_coefficient=1.0),
        Worker(id="E2", name="Bob", salary_coefficient=1.5),
        Worker(id="E3", name="Charlie"),
        Worker(id="E4", name="Diana", salary_coefficient=1.2),
        Worker(id="E5", name="Eve"),
    ]
