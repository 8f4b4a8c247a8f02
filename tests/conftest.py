from __future__ import annotations

import pytest

from game.catalog import Catalog
from game.store import GameStore
from game.simulation import Simulation
from game.config import GameConfig
from game.types import (
    CowType,
    EffectType,
    GameState,
    UpgradeCategory,
    UpgradeTarget,
    UpgradeType,
)


def _upgrade(id, target, effect_type=EffectType.ADD, effect_value=1.0, base_cost=10.0,
             cost_multiplier=1.5, category=UpgradeCategory.RESEARCH) -> UpgradeType:
    return UpgradeType(
        id=id,
        name=id.replace("_", " ").title(),
        base_cost=base_cost,
        cost_multiplier=cost_multiplier,
        effect_value=effect_value,
        effect_type=effect_type,
        target=target,
        category=category,
    )


@pytest.fixture
def catalog() -> Catalog:
    cows = [
        CowType(id="basic", name="Basic", value_multiplier=1.0, unlock_cost=0.0),
        CowType(id="better", name="Better", value_multiplier=3.0, unlock_cost=100.0),
        CowType(id="best", name="Best", value_multiplier=10.0, unlock_cost=1000.0),
    ]
    upgrades = [
        _upgrade("pen", UpgradeTarget.HOUSING, effect_value=5.0, category=UpgradeCategory.HABITAT),
        _upgrade("cart", UpgradeTarget.SHIPPING, effect_value=3.0, base_cost=20.0,
                 cost_multiplier=1.2, category=UpgradeCategory.TRANSPORT),
        _upgrade("spice", UpgradeTarget.VALUE, EffectType.MULTIPLY, effect_value=0.1,
                 base_cost=50.0, cost_multiplier=2.0),
        _upgrade("salt", UpgradeTarget.VALUE, EffectType.ADD, effect_value=2.0, base_cost=5.0,
                 cost_multiplier=1.1),
        _upgrade("incubator", UpgradeTarget.HATCH_RATE, effect_value=1.0, base_cost=30.0,
                 cost_multiplier=1.3),
    ]
    return Catalog(cows, upgrades)


@pytest.fixture
def make_sim(catalog):
    def _make(state: GameState | None = None, **config_overrides) -> Simulation:
        if state is None:
            state = GameState(start_time=1000.0)
        return Simulation(
            catalog=catalog,
            store=GameStore(state),
            config=GameConfig(**config_overrides),
        )

    return _make
