"""Upgrade economics: cost curve and derived stat aggregation.

Cost: base_cost * cost_multiplier ^ level, where level is the number already owned.

Stats: every owned upgrade contributes effect_value * level to its target.
Multiplicative steak-value upgrades scale by (1 + effect_value * level), which
is linear in level, not compounded per level. Additive steak-value upgrades
have no effect.
"""
from __future__ import annotations

from game.catalog import (
    BASE_COW_PRODUCTION,
    BASE_HOUSING,
    BASE_SHIPPING,
    BASE_STEAK_VALUE,
    Catalog,
)
from game.types import DerivedStats, EffectType, GameState, UpgradeTarget, UpgradeType


def calculate_cost(base_cost: float, multiplier: float, level: int) -> float:
    """Price of the next (level + 1-th) unit."""
    return base_cost * multiplier ** level


def upgrade_cost(upgrade: UpgradeType, state: GameState) -> float:
    return calculate_cost(upgrade.base_cost, upgrade.cost_multiplier, state.level(upgrade.id))


def calculate_stats(state: GameState, catalog: Catalog) -> DerivedStats:
    housing_add = 0.0
    shipping_add = 0.0
    value_mult = 1.0
    hatch_add = 0.0

    for upgrade_id, level in state.purchased_upgrades.items():
        if level <= 0:
            continue
        upgrade = catalog.upgrade(upgrade_id)
        if upgrade is None:
            # Stale id from older data; ignore.
            continue

        total_effect = upgrade.effect_value * level

        if upgrade.target == UpgradeTarget.HOUSING:
            housing_add += total_effect
        elif upgrade.target == UpgradeTarget.SHIPPING:
            shipping_add += total_effect
        elif upgrade.target == UpgradeTarget.VALUE:
            if upgrade.effect_type == EffectType.MULTIPLY:
                value_mult *= 1 + upgrade.effect_value * level
        elif upgrade.target == UpgradeTarget.HATCH_RATE:
            hatch_add += total_effect

    cow = catalog.cow(state.current_cow_index)

    housing_capacity = BASE_HOUSING + housing_add
    shipping_capacity = BASE_SHIPPING + shipping_add
    steak_value = BASE_STEAK_VALUE * cow.value_multiplier * value_mult
    cow_production_rate = BASE_COW_PRODUCTION

    # Shipping is a hard ceiling on what actually sells.
    potential_production = state.cows * cow_production_rate
    actual_shipped = min(potential_production, shipping_capacity)
    income_per_second = actual_shipped * steak_value

    return DerivedStats(
        income_per_second=income_per_second,
        steak_value=steak_value,
        housing_capacity=housing_capacity,
        shipping_capacity=shipping_capacity,
        cow_production_rate=cow_production_rate,
        hatch_rate=hatch_add,
    )
