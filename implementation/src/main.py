from __future__ import annotations

import asyncio

from raylib_compat import (
    MOUSE_BUTTON_LEFT,
    begin_drawing,
    clear_background,
    close_window,
    end_drawing,
    get_mouse_position,
    init_window,
    is_mouse_button_down,
    is_mouse_button_pressed,
    set_exit_key,
    set_target_fps,
    window_should_close,
)

from game.config import load_config
from game.headline import WELCOME_HEADLINE
from game.simulation import new_simulation
from game.ui import BG, Ui


async def main() -> None:
    config = load_config()
    init_window(config.window_width, config.window_height, "Steak Inc.")
    set_exit_key(0)  # Disable raylib's default ESC-to-close
    set_target_fps(config.target_fps)

    sim = new_simulation(config, with_headlines=True)
    ui = Ui(width=config.window_width, height=config.window_height)

    # Clock, hold-to-hatch and headline refresh all run as tasks on this loop;
    # the frame loop below only reads state and dispatches actions.
    sim.start()
    try:
        while not window_should_close():
            mouse = get_mouse_position()

            if is_mouse_button_pressed(MOUSE_BUTTON_LEFT):
                if ui.active_menu is None and not ui.prestige_open and ui.hatch_rect().contains(mouse.x, mouse.y):
                    if sim.state.cows < sim.stats().housing_capacity:
                        sim.press_hatch()
                else:
                    ui.handle_click(sim, mouse.x, mouse.y)

            # Releasing the button, or dragging off it, ends the hold.
            if sim.hatch_held and (
                not is_mouse_button_down(MOUSE_BUTTON_LEFT)
                or not ui.hatch_rect().contains(mouse.x, mouse.y)
            ):
                sim.release_hatch()

            begin_drawing()
            clear_background(BG)
            headline = sim.headline.headline if sim.headline is not None else WELCOME_HEADLINE
            ui.draw(sim, headline)
            end_drawing()

            # Yield so the timers get to run between frames
            await asyncio.sleep(0)
    finally:
        sim.stop()
        close_window()


if __name__ == "__main__":
    asyncio.run(main())
