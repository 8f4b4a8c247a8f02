from __future__ import annotations

import asyncio
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Optional

from game import actions
from game.catalog import Catalog, load_catalog
from game.config import GameConfig
from game.headline import HeadlineTicker, generate_headline
from game.store import GameStore
from game.types import CowType, DerivedStats, GameState, new_game_state
from game.upgrades import calculate_stats, upgrade_cost


def tick(state: GameState, catalog: Catalog, interval_ms: float) -> GameState:
    """Accrue one tick of income. Only money and lifetime earnings change."""
    stats = calculate_stats(state, catalog)
    income_per_tick = stats.income_per_second * (interval_ms / 1000)
    return replace(
        state,
        money=state.money + income_per_tick,
        lifetime_earnings=state.lifetime_earnings + income_per_tick,
    )


class RepeatingTimer:
    """Calls ``callback`` every ``interval_s`` seconds on the running event loop.

    One sleep, one call: if the loop stalls, missed firings are dropped
    rather than replayed.
    """

    def __init__(self, interval_s: float, callback: Callable[[], None]) -> None:
        if interval_s <= 0:
            raise ValueError(f"interval must be positive, got {interval_s}")
        self.interval_s = interval_s
        self.callback = callback
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval_s)
            self.callback()


@dataclass
class Simulation:
    """Game session: one store, the catalog, and the timers that drive them.

    Timers:
    - clock: applies tick() every config.tick_interval_ms
    - hatch hold: repeats hatch() every config.hatch_repeat_ms while pressed
    - headline ticker (optional): refreshes the news line
    The timers are independent; none is ordered relative to another.
    """
    catalog: Catalog
    store: GameStore
    config: GameConfig = field(default_factory=GameConfig)
    headline: Optional[HeadlineTicker] = None

    # Bumped on every hatch invocation, accepted or not (drives the visual cue).
    hatch_trigger: int = 0

    _clock: Optional[RepeatingTimer] = None
    _hatch_hold: Optional[RepeatingTimer] = None

    @property
    def state(self) -> GameState:
        return self.store.state

    def stats(self) -> DerivedStats:
        return calculate_stats(self.store.state, self.catalog)

    def current_cow(self) -> CowType:
        return self.catalog.cow(self.store.state.current_cow_index)

    def next_cow(self) -> Optional[CowType]:
        return actions.next_cow(self.store.state, self.catalog)

    def upgrade_cost(self, upgrade_id: str) -> Optional[float]:
        upgrade = self.catalog.upgrade(upgrade_id)
        if upgrade is None:
            return None
        return upgrade_cost(upgrade, self.store.state)

    # ── Actions ─────────────────────────────────────────────────────

    def hatch(self) -> bool:
        self.hatch_trigger += 1
        return self.store.apply(lambda s: actions.hatch(s, self.catalog))

    def buy_upgrade(self, upgrade_id: str) -> bool:
        upgrade = self.catalog.upgrade(upgrade_id)
        if upgrade is None:
            return False

        def _buy(state: GameState) -> GameState:
            # Price from the level owned right now, not when the click happened.
            return actions.purchase_upgrade(state, upgrade_id, upgrade_cost(upgrade, state))

        return self.store.apply(_buy)

    def advance_cow(self) -> bool:
        return self.store.apply(
            lambda s: actions.advance_cow(s, self.catalog, self.store.initial)
        )

    def tick(self) -> None:
        interval_ms = self.config.tick_interval_ms
        self.store.apply(lambda s: tick(s, self.catalog, interval_ms))

    # ── Timers ──────────────────────────────────────────────────────

    @property
    def running(self) -> bool:
        return self._clock is not None and self._clock.running

    @property
    def hatch_held(self) -> bool:
        return self._hatch_hold is not None and self._hatch_hold.running

    def start(self) -> None:
        if self._clock is None:
            self._clock = RepeatingTimer(self.config.tick_interval_ms / 1000, self.tick)
        self._clock.start()
        if self.headline is not None:
            self.headline.start()

    def stop(self) -> None:
        self.release_hatch()
        if self._clock is not None:
            self._clock.stop()
        if self.headline is not None:
            self.headline.stop()

    def press_hatch(self) -> None:
        if self.hatch_held:
            return
        self.hatch()
        self._hatch_hold = RepeatingTimer(self.config.hatch_repeat_ms / 1000, self.hatch)
        self._hatch_hold.start()

    def release_hatch(self) -> None:
        if self._hatch_hold is not None:
            self._hatch_hold.stop()
            self._hatch_hold = None


def new_simulation(
    config: Optional[GameConfig] = None,
    catalog: Optional[Catalog] = None,
    with_headlines: bool = False,
) -> Simulation:
    if config is None:
        config = GameConfig()
    if catalog is None:
        catalog = load_catalog(Path(config.catalog_path) if config.catalog_path else None)
    store = GameStore(new_game_state())
    headline = None
    if with_headlines:
        headline = HeadlineTicker(
            lambda: store.state,
            initial_delay_s=config.headline_initial_delay_s,
            interval_s=config.headline_interval_s,
            fetch=lambda summary: _fetch_headline(summary, config),
        )
    return Simulation(catalog=catalog, store=store, config=config, headline=headline)


def _fetch_headline(summary: str, config: GameConfig) -> str:
    return generate_headline(summary, model=config.headline_model, timeout=config.headline_timeout_s)
