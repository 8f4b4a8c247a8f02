"""Static game data: cow breeds (prestige tiers) and upgrade definitions.

The bundled data lives in catalog_data.json next to this module. Both lists
are validated once at load time; everything downstream treats the catalog as
read-only.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from game.types import CowType, EffectType, UpgradeCategory, UpgradeTarget, UpgradeType


BASE_HOUSING = 10
BASE_SHIPPING = 5
BASE_STEAK_VALUE = 1.0
BASE_COW_PRODUCTION = 1.0  # steaks per cow per second

TICK_RATE_MS = 100
HATCH_REPEAT_MS = 100


class CatalogError(ValueError):
    pass


class Catalog:
    def __init__(self, cows: Iterable[CowType], upgrades: Iterable[UpgradeType]) -> None:
        self.cows: Tuple[CowType, ...] = tuple(cows)
        self.upgrades: Tuple[UpgradeType, ...] = tuple(upgrades)
        if not self.cows:
            raise CatalogError("catalog needs at least one cow type")

        cow_ids = set()
        for cow in self.cows:
            if cow.id in cow_ids:
                raise CatalogError(f"duplicate cow id '{cow.id}'")
            cow_ids.add(cow.id)

        self._upgrades_by_id: Dict[str, UpgradeType] = {}
        for upgrade in self.upgrades:
            if upgrade.id in self._upgrades_by_id:
                raise CatalogError(f"duplicate upgrade id '{upgrade.id}'")
            # Repeated purchases must strictly raise the price.
            if not upgrade.cost_multiplier > 1.0:
                raise CatalogError(
                    f"upgrade '{upgrade.id}' has cost_multiplier {upgrade.cost_multiplier}, must be > 1"
                )
            self._upgrades_by_id[upgrade.id] = upgrade

    def upgrade(self, upgrade_id: str) -> Optional[UpgradeType]:
        return self._upgrades_by_id.get(upgrade_id)

    def cow(self, index: int) -> CowType:
        """Breed at ``index``, falling back to the starter breed when out of range."""
        if 0 <= index < len(self.cows):
            return self.cows[index]
        return self.cows[0]

    def upgrades_in_category(self, category: UpgradeCategory) -> List[UpgradeType]:
        """Upgrades of one menu, cheapest first."""
        return sorted(
            (u for u in self.upgrades if u.category == category),
            key=lambda u: u.base_cost,
        )


def default_catalog_path() -> Path:
    return Path(__file__).resolve().parent / "catalog_data.json"


def _parse_cow(entry: dict) -> CowType:
    return CowType(
        id=entry["id"],
        name=entry["name"],
        value_multiplier=float(entry["value_multiplier"]),
        unlock_cost=float(entry.get("unlock_cost", 0.0)),
        description=entry.get("description", ""),
        color=entry.get("color", ""),
        spot_color=entry.get("spot_color", ""),
        image=entry.get("image", ""),
    )


def _parse_upgrade(entry: dict) -> UpgradeType:
    return UpgradeType(
        id=entry["id"],
        name=entry["name"],
        base_cost=float(entry["base_cost"]),
        cost_multiplier=float(entry["cost_multiplier"]),
        effect_value=float(entry["effect_value"]),
        effect_type=EffectType(entry["effect_type"]),
        target=UpgradeTarget(entry["target"]),
        category=UpgradeCategory(entry["category"]),
        description=entry.get("description", ""),
    )


def catalog_from_dict(raw: dict) -> Catalog:
    try:
        cows = [_parse_cow(entry) for entry in raw.get("cows", [])]
        upgrades = [_parse_upgrade(entry) for entry in raw.get("upgrades", [])]
    except KeyError as e:
        raise CatalogError(f"catalog entry missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise CatalogError(f"invalid catalog entry: {e}") from e
    return Catalog(cows, upgrades)


def load_catalog(path: Optional[Path] = None) -> Catalog:
    if path is None:
        path = default_catalog_path()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"could not read catalog {path}: {e}") from e
    return catalog_from_dict(raw)
