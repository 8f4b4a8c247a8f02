from __future__ import annotations

from dataclasses import replace

from game.store import GameStore
from game.types import GameState


def test_apply_commits_new_state():
    store = GameStore(GameState())
    assert store.apply(lambda s: replace(s, money=5.0))
    assert store.state.money == 5.0


def test_rejected_transition_keeps_state_and_skips_listeners():
    store = GameStore(GameState())
    seen = []
    store.subscribe(seen.append)
    before = store.state
    assert not store.apply(lambda s: s)
    assert store.state is before
    assert seen == []


def test_listeners_receive_committed_snapshot():
    store = GameStore(GameState())
    seen = []
    unsubscribe = store.subscribe(seen.append)
    store.apply(lambda s: replace(s, cows=1.0))
    unsubscribe()
    store.apply(lambda s: replace(s, cows=2.0))
    assert [s.cows for s in seen] == [1.0]


def test_transitions_see_latest_state():
    store = GameStore(GameState())
    for _ in range(3):
        store.apply(lambda s: replace(s, money=s.money + 1.0))
    assert store.state.money == 3.0


def test_reset_restores_initial_snapshot():
    initial = GameState(start_time=42.0)
    store = GameStore(initial)
    store.apply(lambda s: replace(s, money=10.0))
    store.reset()
    assert store.state is initial
    assert store.initial is initial
