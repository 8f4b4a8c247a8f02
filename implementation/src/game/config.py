from __future__ import annotations

from dataclasses import asdict, dataclass, fields
import json
import os
from pathlib import Path

from game.catalog import HATCH_REPEAT_MS, TICK_RATE_MS

CONFIG_ENV_VAR = "STEAK_INC_CONFIG"


def _repo_root() -> Path:
    here = Path(__file__).resolve()
    return here.parents[2]


def default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).resolve()
    return _repo_root() / "implementation" / "config.json"


@dataclass
class GameConfig:
    tick_interval_ms: int = TICK_RATE_MS
    hatch_repeat_ms: int = HATCH_REPEAT_MS

    headline_initial_delay_s: float = 2.0
    headline_interval_s: float = 30.0
    headline_model: str = "gemini-2.5-flash"
    headline_timeout_s: float = 10.0

    window_width: int = 480
    window_height: int = 800
    target_fps: int = 60

    # Empty means the bundled catalog_data.json
    catalog_path: str = ""


def load_config(path: Path | None = None) -> GameConfig:
    if path is None:
        path = default_config_path()
    if not path.exists():
        return GameConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"[config] Could not read {path}: {e}; using defaults")
        return GameConfig()
    if not isinstance(data, dict):
        print(f"[config] {path} is not a JSON object; using defaults")
        return GameConfig()
    known = {f.name: f.type for f in fields(GameConfig)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        print(f"[config] Ignoring unknown keys: {', '.join(unknown)}")
    values = {}
    for name, type_name in known.items():
        if name not in data:
            continue
        try:
            values[name] = _coerce(type_name, data[name])
        except (TypeError, ValueError, OverflowError) as e:
            print(f"[config] Bad value for {name} ({data[name]!r}): {e}; using default")
    return GameConfig(**values)


def _coerce(type_name: str, value):
    if type_name == "str":
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {type(value).__name__}")
        return value
    if isinstance(value, bool):
        raise TypeError("expected a number, got bool")
    number = float(value)
    if type_name == "int":
        if not number.is_integer():
            raise ValueError("expected a whole number")
        return int(number)
    return number


def save_config(config: GameConfig, path: Path | None = None) -> None:
    if path is None:
        path = default_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(config), indent=2), encoding="utf-8")
