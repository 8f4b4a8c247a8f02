from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from raylib_compat import (
    Color,
    draw_rectangle,
    draw_rectangle_lines,
    draw_text,
    measure_text,
)

from game.formatting import format_money, format_number
from game.simulation import Simulation
from game.types import EffectType, UpgradeCategory, UpgradeType


MENU_TITLES = {
    UpgradeCategory.HABITAT: "Habitats",
    UpgradeCategory.TRANSPORT: "Shipping Depot",
    UpgradeCategory.RESEARCH: "Research Lab",
}

# Bottom row, left to right
MENU_ORDER = (UpgradeCategory.RESEARCH, UpgradeCategory.TRANSPORT, UpgradeCategory.HABITAT)
MENU_COLORS = {
    UpgradeCategory.RESEARCH: Color(59, 130, 246),
    UpgradeCategory.TRANSPORT: Color(234, 179, 8),
    UpgradeCategory.HABITAT: Color(22, 163, 74),
}

BG = Color(2, 6, 23)
PANEL = Color(15, 23, 42)
ROW = Color(30, 41, 59)
BORDER = Color(51, 65, 85)
TEXT = Color(241, 245, 249)
MUTED = Color(148, 163, 184)
RED = Color(220, 38, 38)
GREEN = Color(22, 163, 74)
YELLOW = Color(234, 179, 8)
DISABLED = Color(71, 85, 105)


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    w: int
    h: int

    def contains(self, px: float, py: float) -> bool:
        return self.x <= px < self.x + self.w and self.y <= py < self.y + self.h


@dataclass
class Ui:
    width: int
    height: int
    active_menu: Optional[UpgradeCategory] = None
    prestige_open: bool = False

    # ── Layout ──────────────────────────────────────────────────────

    def headline_rect(self) -> Rect:
        return Rect(0, 0, self.width, 28)

    def cow_button_rect(self) -> Rect:
        return Rect(16, 40, 72, 72)

    def hatch_rect(self) -> Rect:
        return Rect(16, self.height - 112, self.width - 32, 88)

    def menu_button_rects(self) -> List[Tuple[UpgradeCategory, Rect]]:
        y = self.hatch_rect().y - 64
        return [(cat, Rect(20 + i * 68, y, 56, 56)) for i, cat in enumerate(MENU_ORDER)]

    def panel_rect(self) -> Rect:
        return Rect(12, 60, self.width - 24, self.height - 120)

    def close_rect(self) -> Rect:
        panel = self.panel_rect()
        return Rect(panel.x + panel.w - 40, panel.y + 8, 32, 28)

    def upgrade_rows(self, sim: Simulation) -> List[Tuple[UpgradeType, Rect]]:
        if self.active_menu is None:
            return []
        panel = self.panel_rect()
        rows = []
        y = panel.y + 48
        for upgrade in sim.catalog.upgrades_in_category(self.active_menu):
            rows.append((upgrade, Rect(panel.x + 8, y, panel.w - 16, 72)))
            y += 80
        return rows

    @staticmethod
    def buy_rect(row: Rect) -> Rect:
        return Rect(row.x + row.w - 100, row.y + 8, 92, row.h - 16)

    def prestige_button_rect(self) -> Rect:
        panel = self.panel_rect()
        return Rect(panel.x + 16, panel.y + panel.h - 72, panel.w - 32, 56)

    # ── Input ───────────────────────────────────────────────────────

    def handle_click(self, sim: Simulation, mx: float, my: float) -> None:
        """Route a click that did not land on the hatch button."""
        if self.active_menu is not None or self.prestige_open:
            if self.close_rect().contains(mx, my):
                self.active_menu = None
                self.prestige_open = False
                return
            if self.prestige_open:
                if self.prestige_button_rect().contains(mx, my):
                    cow = sim.next_cow()
                    if sim.advance_cow() and cow is not None:
                        print(f"[farm] Upgraded to {cow.name}")
                        self.prestige_open = False
                return
            for upgrade, row in self.upgrade_rows(sim):
                if self.buy_rect(row).contains(mx, my):
                    sim.buy_upgrade(upgrade.id)
                    return
            return

        if self.cow_button_rect().contains(mx, my):
            self.prestige_open = True
            return
        for category, rect in self.menu_button_rects():
            if rect.contains(mx, my):
                self.active_menu = category
                return

    # ── Drawing ─────────────────────────────────────────────────────

    def draw(self, sim: Simulation, headline: str) -> None:
        state = sim.state
        stats = sim.stats()
        cow = sim.current_cow()

        bar = self.headline_rect()
        draw_rectangle(bar.x, bar.y, bar.w, bar.h, PANEL)
        draw_rectangle(bar.x, bar.y, 56, bar.h, RED)
        draw_text("NEWS", bar.x + 8, bar.y + 8, 14, TEXT)
        draw_text(headline, bar.x + 64, bar.y + 8, 14, MUTED)

        btn = self.cow_button_rect()
        draw_rectangle(btn.x, btn.y, btn.w, btn.h, PANEL)
        draw_rectangle_lines(btn.x, btn.y, btn.w, btn.h, BORDER)
        draw_text(cow.name, btn.x + 4, btn.y + btn.h + 4, 12, TEXT)
        draw_text(f"x{cow.value_multiplier:g}", btn.x + 8, btn.y + 28, 16, YELLOW)

        money = format_money(state.money)
        money_w = measure_text(money, 32)
        draw_text(money, (self.width - money_w) // 2, 44, 32, TEXT)
        income = f"{format_money(stats.income_per_second)}/sec"
        draw_text(income, (self.width - measure_text(income, 14)) // 2, 82, 14, MUTED)

        full = state.cows >= stats.housing_capacity
        draw_text("HABITATS", 16, 140, 12, MUTED)
        draw_text(
            f"{format_number(state.cows)} / {format_number(stats.housing_capacity)}",
            16, 156, 16, RED if full else TEXT,
        )
        draw_text("SHIPPING", 16, 184, 12, MUTED)
        draw_text(f"{format_number(stats.shipping_capacity)} /sec", 16, 200, 16, TEXT)

        for category, rect in self.menu_button_rects():
            draw_rectangle(rect.x, rect.y, rect.w, rect.h, MENU_COLORS[category])
            label = MENU_TITLES[category].split()[-1][:4]
            draw_text(label, rect.x + 6, rect.y + 20, 14, TEXT)

        hatch = self.hatch_rect()
        draw_rectangle(hatch.x, hatch.y, hatch.w, hatch.h, DISABLED if full else RED)
        label = "HATCH"
        draw_text(label, hatch.x + (hatch.w - measure_text(label, 32)) // 2, hatch.y + 28, 32, TEXT)

        if self.active_menu is not None:
            self._draw_upgrade_panel(sim)
        elif self.prestige_open:
            self._draw_prestige_panel(sim)

    def _draw_panel_frame(self, title: str) -> Rect:
        panel = self.panel_rect()
        draw_rectangle(0, 0, self.width, self.height, Color(0, 0, 0, 180))
        draw_rectangle(panel.x, panel.y, panel.w, panel.h, PANEL)
        draw_rectangle_lines(panel.x, panel.y, panel.w, panel.h, BORDER)
        draw_text(title.upper(), panel.x + 12, panel.y + 14, 20, TEXT)
        close = self.close_rect()
        draw_text("X", close.x + 10, close.y + 4, 20, MUTED)
        return panel

    def _draw_upgrade_panel(self, sim: Simulation) -> None:
        self._draw_panel_frame(MENU_TITLES[self.active_menu])
        state = sim.state
        for upgrade, row in self.upgrade_rows(sim):
            level = state.level(upgrade.id)
            cost = sim.upgrade_cost(upgrade.id)
            can_afford = cost is not None and state.money >= cost
            sign = "+" if upgrade.effect_type == EffectType.ADD else "x"

            draw_rectangle(row.x, row.y, row.w, row.h, ROW)
            draw_text(f"{upgrade.name}  Lvl {level}", row.x + 8, row.y + 8, 16, TEXT)
            draw_text(upgrade.description, row.x + 8, row.y + 30, 12, MUTED)
            draw_text(
                f"{sign}{upgrade.effect_value:g} {upgrade.target.value}",
                row.x + 8, row.y + 50, 12, Color(96, 165, 250),
            )
            buy = self.buy_rect(row)
            draw_rectangle(buy.x, buy.y, buy.w, buy.h, GREEN if can_afford else DISABLED)
            draw_text("Buy", buy.x + 8, buy.y + 8, 14, TEXT)
            draw_text(format_money(cost or 0.0), buy.x + 8, buy.y + 30, 14, TEXT)

    def _draw_prestige_panel(self, sim: Simulation) -> None:
        panel = self._draw_panel_frame("Farm Upgrade")
        current = sim.current_cow()
        x = panel.x + 16
        draw_text("CURRENT FARM", x, panel.y + 56, 12, MUTED)
        draw_text(current.name, x, panel.y + 72, 24, TEXT)
        draw_text(current.description, x, panel.y + 100, 12, MUTED)
        draw_text(f"Value Multiplier: x{current.value_multiplier:g}", x, panel.y + 118, 14, Color(96, 165, 250))

        nxt = sim.next_cow()
        if nxt is None:
            draw_text("MAXIMUM TECHNOLOGY ACHIEVED", x, panel.y + 180, 18, YELLOW)
            return

        can_afford = sim.state.money >= nxt.unlock_cost
        draw_text("NEXT UPGRADE", x, panel.y + 170, 12, YELLOW)
        draw_text(nxt.name, x, panel.y + 186, 24, TEXT)
        draw_text(nxt.description, x, panel.y + 214, 12, MUTED)
        draw_text(f"New Multiplier: x{nxt.value_multiplier:g}", x, panel.y + 232, 14, YELLOW)
        draw_text("REQUIRED FUNDS", x, panel.y + 264, 12, MUTED)
        draw_text(format_money(nxt.unlock_cost), x, panel.y + 280, 20, GREEN if can_afford else RED)
        draw_text(
            "Upgrading sells your farm: cows, habitats and money are lost.",
            x, panel.y + 312, 12, MUTED,
        )

        btn = self.prestige_button_rect()
        draw_rectangle(btn.x, btn.y, btn.w, btn.h, GREEN if can_afford else DISABLED)
        label = "UPGRADE FARM" if can_afford else "INSUFFICIENT FUNDS"
        draw_text(label, btn.x + (btn.w - measure_text(label, 20)) // 2, btn.y + 18, 20, TEXT)
