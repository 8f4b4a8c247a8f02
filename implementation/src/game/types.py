from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional


class EffectType(str, Enum):
    ADD = "add"
    MULTIPLY = "multiply"


class UpgradeTarget(str, Enum):
    HOUSING = "housing"
    SHIPPING = "shipping"
    VALUE = "value"
    HATCH_RATE = "hatch_rate"


class UpgradeCategory(str, Enum):
    HABITAT = "HABITAT"
    TRANSPORT = "TRANSPORT"
    RESEARCH = "RESEARCH"


@dataclass(frozen=True)
class CowType:
    """A breed the farm can prestige into. Index 0 in the catalog is the starter."""
    id: str
    name: str
    value_multiplier: float
    unlock_cost: float  # money required to upgrade TO this breed
    description: str = ""
    color: str = ""
    spot_color: str = ""
    image: str = ""


@dataclass(frozen=True)
class UpgradeType:
    id: str
    name: str
    base_cost: float
    cost_multiplier: float  # cost scales by this factor per level
    effect_value: float  # per-level effect amount
    effect_type: EffectType
    target: UpgradeTarget
    category: UpgradeCategory
    description: str = ""


@dataclass(frozen=True)
class GameState:
    money: float = 0.0
    cows: float = 0.0
    current_cow_index: int = 0
    lifetime_earnings: float = 0.0
    start_time: float = 0.0
    purchased_upgrades: Mapping[str, int] = field(default_factory=dict)  # id -> level

    def level(self, upgrade_id: str) -> int:
        return self.purchased_upgrades.get(upgrade_id, 0)


@dataclass(frozen=True)
class DerivedStats:
    income_per_second: float
    steak_value: float
    housing_capacity: float
    shipping_capacity: float
    cow_production_rate: float  # steaks per cow per second
    hatch_rate: float  # bonus cows per hatch


def new_game_state(start_time: Optional[float] = None) -> GameState:
    if start_time is None:
        start_time = time.time()
    return GameState(start_time=start_time)
