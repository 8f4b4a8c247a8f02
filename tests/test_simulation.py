from __future__ import annotations

import asyncio

import pytest

from game.catalog import load_catalog
from game.config import GameConfig
from game.simulation import RepeatingTimer, new_simulation, tick
from game.types import GameState
from game.upgrades import calculate_stats


def test_tick_accrues_income_for_interval(catalog):
    state = GameState(cows=4.0, money=1.0, lifetime_earnings=2.0, purchased_upgrades={"spice": 1})
    income = calculate_stats(state, catalog).income_per_second
    after = tick(state, catalog, 100)
    assert after.money == pytest.approx(1.0 + income * 100 / 1000)
    assert after.lifetime_earnings == pytest.approx(2.0 + income * 100 / 1000)


def test_tick_changes_nothing_else(catalog):
    state = GameState(cows=4.0, current_cow_index=1, start_time=7.0, purchased_upgrades={"pen": 1})
    after = tick(state, catalog, 250)
    assert after.cows == state.cows
    assert after.current_cow_index == state.current_cow_index
    assert after.start_time == state.start_time
    assert after.purchased_upgrades == state.purchased_upgrades


def test_simulation_tick_uses_configured_interval(make_sim):
    sim = make_sim(GameState(cows=5.0), tick_interval_ms=500)
    sim.tick()
    assert sim.state.money == pytest.approx(2.5)


def test_hatch_trigger_counts_rejected_hatches(make_sim):
    sim = make_sim(GameState(cows=10.0))
    assert not sim.hatch()
    assert not sim.hatch()
    assert sim.hatch_trigger == 2
    assert sim.state.cows == 10.0


def test_buy_upgrade_prices_from_current_level(make_sim):
    sim = make_sim(GameState(money=100.0))
    assert sim.buy_upgrade("pen")
    assert sim.buy_upgrade("pen")
    assert sim.state.level("pen") == 2
    assert sim.state.money == pytest.approx(100.0 - 10.0 - 15.0)
    assert sim.upgrade_cost("pen") == pytest.approx(22.5)


def test_buy_upgrade_rejections(make_sim):
    sim = make_sim(GameState(money=5.0))
    assert not sim.buy_upgrade("pen")
    assert not sim.buy_upgrade("no_such_upgrade")
    assert sim.upgrade_cost("no_such_upgrade") is None
    assert sim.state.money == 5.0


def test_advance_cow_through_facade(make_sim):
    sim = make_sim(GameState(money=150.0, lifetime_earnings=150.0, start_time=3.0))
    assert sim.advance_cow()
    assert sim.current_cow().id == "better"
    assert sim.next_cow().id == "best"
    assert sim.state.lifetime_earnings == 150.0
    assert sim.state.start_time == 3.0
    assert not sim.advance_cow()


def test_repeating_timer_rejects_bad_interval():
    with pytest.raises(ValueError):
        RepeatingTimer(0, lambda: None)


def test_repeating_timer_stops_firing_after_stop():
    calls = []

    async def scenario():
        timer = RepeatingTimer(0.01, lambda: calls.append(1))
        timer.start()
        timer.start()
        await asyncio.sleep(0.1)
        timer.stop()
        fired = len(calls)
        await asyncio.sleep(0.05)
        return fired

    fired = asyncio.run(scenario())
    assert fired > 0
    assert len(calls) == fired


def test_clock_accrues_money_until_stopped(make_sim):
    sim = make_sim(GameState(cows=5.0), tick_interval_ms=10)

    async def scenario():
        sim.start()
        assert sim.running
        await asyncio.sleep(0.1)
        sim.stop()
        stopped_at = sim.state.money
        await asyncio.sleep(0.05)
        return stopped_at

    stopped_at = asyncio.run(scenario())
    assert stopped_at > 0
    assert sim.state.money == stopped_at
    assert sim.state.lifetime_earnings == stopped_at
    assert not sim.running


def test_press_hatch_repeats_until_release(make_sim):
    sim = make_sim(hatch_repeat_ms=10)

    async def scenario():
        sim.press_hatch()
        assert sim.state.cows == 1.0
        await asyncio.sleep(0.05)
        sim.release_hatch()
        held = sim.state.cows
        await asyncio.sleep(0.05)
        return held

    held = asyncio.run(scenario())
    assert held > 1.0
    assert sim.state.cows == held
    assert not sim.hatch_held


def test_press_hatch_twice_does_not_stack(make_sim):
    sim = make_sim(hatch_repeat_ms=1000)

    async def scenario():
        sim.press_hatch()
        sim.press_hatch()
        assert sim.hatch_trigger == 1
        sim.stop()

    asyncio.run(scenario())
    assert not sim.hatch_held


def test_new_simulation_uses_bundled_catalog():
    sim = new_simulation(GameConfig())
    assert len(sim.catalog.cows) == len(load_catalog().cows)
    assert sim.state.money == 0.0
    assert sim.headline is None
