import pygame

from game.state_manager import ViewerState
from ui_new.planet_buttons import PlanetButtonBar


def click(bar, button):
    pos = button.rect.center
    bar.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos))
    return bar.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1, pos=pos))


def test_buttons_carry_planet_names(display, scene):
    bar = PlanetButtonBar(scene.planet_names, on_click=ViewerState().click_planet)
    assert [b.data for b in bar.buttons.values()] == scene.planet_names


def test_click_toggles_follow(display, scene):
    state = ViewerState()
    bar = PlanetButtonBar(scene.planet_names, on_click=state.click_planet)

    assert click(bar, bar.buttons["earth"])
    assert state.mode.is_following("earth")
    assert bar.buttons["earth"].state.active

    assert click(bar, bar.buttons["earth"])
    assert state.mode.is_overview
    assert not bar.buttons["earth"].state.active


def test_switching_planets_skips_overview(display, scene):
    state = ViewerState()
    seen = []

    def on_click(name):
        mode = state.click_planet(name)
        seen.append(mode)
        return mode

    bar = PlanetButtonBar(scene.planet_names, on_click=on_click)
    click(bar, bar.buttons["mars"])
    click(bar, bar.buttons["venus"])
    assert [m.planet for m in seen] == ["mars", "venus"]
    assert not any(m.is_overview for m in seen)
    assert bar.buttons["venus"].state.active
    assert not bar.buttons["mars"].state.active


def test_click_outside_is_ignored(display, scene):
    state = ViewerState()
    bar = PlanetButtonBar(scene.planet_names, on_click=state.click_planet)
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5000, 5000))
    assert not bar.handle_event(event)
    assert state.mode.is_overview


def test_layout_wraps_on_narrow_window(display, scene):
    bar = PlanetButtonBar(scene.planet_names, on_click=ViewerState().click_planet)
    one_row = bar.bottom
    bar.layout(300)
    assert bar.bottom > one_row
    assert all(b.rect.right <= 300 for b in bar.buttons.values())
