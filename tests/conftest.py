"""
Shared pytest fixtures for atomz tests.

Random generators are seeded per test so failures are reproducible; game
state fixtures are function-scoped to keep tests isolated.
"""

from pathlib import Path
import random
import sys
from typing import Callable, List

import pytest

# Ensure the repository root is on sys.path so `import atomz` works when
# running pytest without installing the package.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from atomz.classic import ClassicGameState, new_classic_game
from atomz.game.player import PlayerInfo, PlayerRage
from atomz.geometry import CellMaterial, CellType, Vector, Volume


NUMBER_OF_LOOPS_FOR_SMALL_TEST = 200
NUMBER_OF_LOOPS_FOR_NORMAL_TEST = 1_000


# =============================================================================
# RANDOM GENERATORS
# =============================================================================


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240917)


@pytest.fixture
def random_vector(rng) -> Callable[[int, int], Vector]:
    """Vector with every component drawn from ``[low, high]``."""

    def _random_vector(low: int, high: int) -> Vector:
        return Vector(rng.randint(low, high), rng.randint(low, high), rng.randint(low, high))

    return _random_vector


@pytest.fixture
def random_volume(random_vector) -> Callable[[int, int], Volume]:
    """Volume anchored in ``[-100, 100]`` with diagonal components in ``[low, high]``."""

    def _random_volume(low: int = 1, high: int = 5) -> Volume:
        blc = random_vector(-100, 100)
        volume = Volume.new(blc, blc + random_vector(low, high))
        assert volume is not None
        return volume

    return _random_volume


@pytest.fixture
def random_cell(rng) -> Callable[[], CellType]:
    def _random_cell() -> CellType:
        material = rng.choice(list(CellMaterial))
        if rng.random() < 0.5:
            return CellType.flat(material)
        return CellType.fill(material)

    return _random_cell


# =============================================================================
# GAME FIXTURES
# =============================================================================


@pytest.fixture
def player_infos() -> List[PlayerInfo]:
    return [
        PlayerInfo.new("Alice", PlayerRage.RED, True),
        PlayerInfo.new("Bob", PlayerRage.BLUE, False),
    ]


@pytest.fixture
def three_player_infos() -> List[PlayerInfo]:
    return [
        PlayerInfo.new("Alice", PlayerRage.RED, True),
        PlayerInfo.new("Bob", PlayerRage.BLUE, False),
        PlayerInfo.new("Carol", PlayerRage.GREEN, False),
    ]


@pytest.fixture
def classic_state(player_infos) -> ClassicGameState:
    """Opening state of a 3x3 two-player classic game."""
    return new_classic_game(player_infos, width=3, height=3)
