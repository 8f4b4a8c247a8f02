"""Player actions as state -> state transitions.

Each handler recomputes derived stats from the state it is handed, so it is
always checked against the state current at application time. A rejected
action returns the very same state object; callers compare identity to tell
accepted from rejected.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Optional

from game.catalog import Catalog
from game.types import CowType, GameState
from game.upgrades import calculate_stats


def can_hatch(state: GameState, catalog: Catalog) -> bool:
    return state.cows < calculate_stats(state, catalog).housing_capacity


def hatch(state: GameState, catalog: Catalog) -> GameState:
    stats = calculate_stats(state, catalog)
    if state.cows >= stats.housing_capacity:
        return state
    # Each manual hatch also grants the incubator bonus, clamped to housing.
    cows = min(state.cows + 1 + stats.hatch_rate, stats.housing_capacity)
    return replace(state, cows=cows)


def can_afford(state: GameState, cost: float) -> bool:
    return state.money >= cost


def purchase_upgrade(state: GameState, upgrade_id: str, cost: float) -> GameState:
    """Buy one level of ``upgrade_id`` for ``cost``.

    ``cost`` must be computed from the level owned in ``state``; the handler
    charges whatever it is given.
    """
    if state.money < cost:
        return state
    upgrades = dict(state.purchased_upgrades)
    upgrades[upgrade_id] = upgrades.get(upgrade_id, 0) + 1
    return replace(state, money=state.money - cost, purchased_upgrades=upgrades)


def next_cow(state: GameState, catalog: Catalog) -> Optional[CowType]:
    next_index = state.current_cow_index + 1
    if next_index >= len(catalog.cows):
        return None
    return catalog.cows[next_index]


def can_advance_cow(state: GameState, catalog: Catalog) -> bool:
    cow = next_cow(state, catalog)
    return cow is not None and state.money >= cow.unlock_cost


def advance_cow(state: GameState, catalog: Catalog, initial: Optional[GameState] = None) -> GameState:
    """Prestige into the next breed.

    Sells the farm: money, cows and upgrades go back to the initial snapshot.
    Only the new breed index and lifetime earnings survive.
    """
    if not can_advance_cow(state, catalog):
        return state
    if initial is None:
        initial = GameState(start_time=state.start_time)
    return replace(
        initial,
        current_cow_index=state.current_cow_index + 1,
        lifetime_earnings=state.lifetime_earnings,
        money=0.0,
        cows=0.0,
        purchased_upgrades={},
    )
