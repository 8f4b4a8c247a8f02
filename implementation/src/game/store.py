from __future__ import annotations

from typing import Callable, List

from game.types import GameState

Transition = Callable[[GameState], GameState]
Listener = Callable[[GameState], None]


class GameStore:
    """Owns the one current GameState.

    Transitions are applied to whatever state is current at call time and
    committed in one assignment, so observers never see a partial update.
    """

    def __init__(self, initial: GameState) -> None:
        self._initial = initial
        self._state = initial
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def initial(self) -> GameState:
        return self._initial

    def apply(self, transition: Transition) -> bool:
        """Run ``transition`` on the current state. Returns False if it was rejected."""
        prev = self._state
        new = transition(prev)
        if new is prev:
            return False
        self._state = new
        for listener in list(self._listeners):
            listener(new)
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def reset(self) -> None:
        self.apply(lambda _state: self._initial)
