"""Satirical news ticker backed by the Gemini text API.

Purely decorative. Every failure path degrades to a canned headline and a log
line; nothing here can raise into, block, or modify the simulation.
"""
from __future__ import annotations

import asyncio
import math
import os
from typing import Callable, Optional

import requests

from game.types import GameState

API_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"
DEFAULT_MODEL = "gemini-2.5-flash"

WELCOME_HEADLINE = "Welcome to Steak Inc. Start clicking to build your empire!"
MISSING_KEY_HEADLINE = "Steak Inc. stocks remain stable despite lack of AI oversight."
FAILURE_HEADLINE = "Breaking: Local cow jumps over the moon, astronomers baffled."

_PROMPT = """
You are a satirical news ticker for a game called "Steak Inc." where the player runs a massive industrial cow farm.

Current Game State Context: {summary}

Generate ONE short, funny, satirical news headline (max 10 words) about the steak industry, cows, or the economy.
Examples:
- "Cows demand union representation, farmer offers extra hay."
- "Steak prices soar as vegetarians convert en masse."
- "Scientists discover 5th stomach dedicated to profit."

Output ONLY the headline text.
"""


def resolve_api_key(api_key: Optional[str] = None) -> Optional[str]:
    if api_key:
        return api_key
    return os.environ.get("API_KEY") or os.environ.get("GEMINI_API_KEY") or None


def build_summary(state: GameState) -> str:
    return f"Money: {math.floor(state.money)}, Total Cows: {state.cows:.15g}"


def _extract_text(payload: dict) -> str:
    parts = payload["candidates"][0]["content"]["parts"]
    text = "".join(part.get("text", "") for part in parts if isinstance(part, dict)).strip()
    if not text:
        raise ValueError("empty headline")
    return text


def generate_headline(
    summary: str,
    api_key: Optional[str] = None,
    model: str = DEFAULT_MODEL,
    timeout: float = 10.0,
) -> str:
    key = resolve_api_key(api_key)
    if key is None:
        print("[headline] Gemini API key missing")
        return MISSING_KEY_HEADLINE

    try:
        r = requests.post(
            API_URL.format(model=model),
            headers={"x-goog-api-key": key},
            json={"contents": [{"parts": [{"text": _PROMPT.format(summary=summary)}]}]},
            timeout=timeout,
        )
        r.raise_for_status()
        return _extract_text(r.json())
    except (requests.RequestException, KeyError, IndexError, TypeError, ValueError) as e:
        print(f"[headline] Failed to generate news: {e}")
        return FAILURE_HEADLINE


class HeadlineTicker:
    """Refreshes ``headline`` in the background from the latest game state.

    ``read_state`` is called at fire time, so each request describes the farm
    as it is then, not as it was when the ticker started.
    """

    def __init__(
        self,
        read_state: Callable[[], GameState],
        initial_delay_s: float = 2.0,
        interval_s: float = 30.0,
        fetch: Optional[Callable[[str], str]] = None,
    ) -> None:
        self.read_state = read_state
        self.initial_delay_s = initial_delay_s
        self.interval_s = interval_s
        self.fetch = fetch if fetch is not None else generate_headline
        self.headline = WELCOME_HEADLINE
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

    async def refresh(self) -> str:
        summary = build_summary(self.read_state())
        # Blocking HTTP goes to a worker thread; the loop keeps ticking.
        self.headline = await asyncio.to_thread(self.fetch, summary)
        return self.headline

    async def _run(self) -> None:
        await asyncio.sleep(self.initial_delay_s)
        while True:
            try:
                await self.refresh()
            except Exception as e:
                # Keep the last headline; the next interval tries again.
                print(f"[headline] Refresh failed: {e}")
            await asyncio.sleep(self.interval_s)
