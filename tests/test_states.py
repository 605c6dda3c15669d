import pygame
import pytest

from towerdefense.battle import Battle
from towerdefense.buttons import ButtonFactory
from towerdefense.session import MAX_VOLUME, MIN_VOLUME, Session
from towerdefense.states import (
    GameState,
    MainMenuState,
    PauseState,
    SettingsState,
    StartState,
    TowerMenuState,
)

MAIN_MENU_LABELS = ["JOUER", "PARAMETRES", "SCORES", "QUITTER"]
PAUSE_LABELS = ["REPRENDRE", "PARAMETRES", "MENU PRINCIPAL"]
SETTINGS_LABELS = ["VOLUME -", "VOLUME +", "RETOUR"]
TOWER_MENU_LABELS = ["TOUR BASIQUE (50 or)", "TOUR SNIPER (100 or)", "RETOUR"]
PATH_COLOR = (139, 69, 19)


class FakeSound:
    def __init__(self):
        self.plays = []

    def play(self, *args, **kwargs):
        self.plays.append(kwargs)

    def set_volume(self, value):
        pass


class FakeApp:
    def __init__(self):
        self.click = FakeSound()
        self.session = Session(sounds={"click": self.click})
        self.mouse_pos = (0, 0)
        self.states = []
        self.closed = False

    def change_state(self, state):
        self.states.append(state)

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def fonts():
    pygame.font.init()
    yield


@pytest.fixture
def factory():
    return ButtonFactory(font=pygame.font.Font(None, 24))


@pytest.fixture
def app():
    return FakeApp()


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def click(state, app, button):
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=button.rect.center)
    state.handle_event(event, app)


def button_named(state, label):
    return next(b for b in state.buttons if b.label == label)


def labels(state):
    return [b.label for b in state.buttons]


def assert_is_battle(state):
    assert isinstance(state, Battle)
    surface = pygame.Surface((800, 600))
    state.draw(surface)
    # Row 6 of the board is the enemy path, drawn below the 80-pixel HUD.
    assert tuple(surface.get_at((25, 405)))[:3] == PATH_COLOR


def test_game_state_is_abstract():
    with pytest.raises(TypeError):
        GameState()


def test_start_enter_opens_main_menu(app):
    StartState().handle_event(key(pygame.K_RETURN), app)
    assert len(app.states) == 1
    assert isinstance(app.states[0], MainMenuState)
    assert labels(app.states[0]) == MAIN_MENU_LABELS


def test_start_ignores_other_keys(app):
    StartState().handle_event(key(pygame.K_a), app)
    assert app.states == []


def test_start_draws_text_below_its_top():
    surface = pygame.Surface((800, 600), pygame.SRCALPHA)
    StartState().draw(surface)
    area = surface.get_bounding_rect(min_alpha=1)
    assert area.width > 0
    assert area.top >= 250


def test_main_menu_buttons(factory):
    menu = MainMenuState(factory)
    assert labels(menu) == MAIN_MENU_LABELS


def test_main_menu_play_starts_battle(factory, app):
    menu = MainMenuState(factory)
    click(menu, app, button_named(menu, "JOUER"))
    assert labels(menu) == MAIN_MENU_LABELS
    assert len(app.click.plays) == 1
    assert len(app.states) == 1
    assert_is_battle(app.states[0])


def test_main_menu_settings(factory, app):
    menu = MainMenuState(factory)
    click(menu, app, button_named(menu, "PARAMETRES"))
    assert labels(menu) == MAIN_MENU_LABELS
    assert len(app.states) == 1
    assert isinstance(app.states[0], SettingsState)
    assert labels(app.states[0]) == SETTINGS_LABELS


def test_main_menu_scores_prints(factory, app, capsys):
    menu = MainMenuState(factory)
    click(menu, app, button_named(menu, "SCORES"))
    assert "Scores sélectionnés" in capsys.readouterr().out
    assert app.states == []


def test_main_menu_quit_closes(factory, app):
    menu = MainMenuState(factory)
    click(menu, app, button_named(menu, "QUITTER"))
    assert app.closed is True
    assert app.states == []
    assert len(app.click.plays) == 1
    assert app.session.gold == 100
    assert labels(menu) == MAIN_MENU_LABELS


def test_click_outside_buttons_does_nothing(factory, app):
    menu = MainMenuState(factory)
    event = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 5))
    menu.handle_event(event, app)
    assert app.click.plays == []
    assert app.states == []


def test_update_tracks_hover(factory, app):
    menu = MainMenuState(factory)
    target = button_named(menu, "SCORES")
    app.mouse_pos = target.rect.center
    menu.update(app)
    assert [b.hovered for b in menu.buttons] == [b is target for b in menu.buttons]


@pytest.mark.parametrize("code", [pygame.K_ESCAPE, pygame.K_q])
def test_pause_keys_resume_battle(factory, app, code):
    PauseState(factory).handle_event(key(code), app)
    assert len(app.states) == 1
    assert_is_battle(app.states[0])


def test_pause_buttons(factory):
    pause = PauseState(factory)
    assert labels(pause) == PAUSE_LABELS


def test_pause_resume_button(factory, app):
    pause = PauseState(factory)
    click(pause, app, button_named(pause, "REPRENDRE"))
    assert labels(pause) == PAUSE_LABELS
    assert len(app.click.plays) == 1
    assert len(app.states) == 1
    assert_is_battle(app.states[0])


def test_pause_settings_button_only_clicks(factory, app):
    pause = PauseState(factory)
    click(pause, app, button_named(pause, "PARAMETRES"))
    assert len(app.click.plays) == 1
    assert app.states == []
    assert app.session.volume == 50
    assert labels(pause) == PAUSE_LABELS


def test_pause_main_menu_button(factory, app):
    pause = PauseState(factory)
    click(pause, app, button_named(pause, "MENU PRINCIPAL"))
    assert labels(pause) == PAUSE_LABELS
    assert len(app.states) == 1
    assert isinstance(app.states[0], MainMenuState)
    assert labels(app.states[0]) == MAIN_MENU_LABELS


def test_pause_overlay_darkens_screen(factory):
    surface = pygame.Surface((800, 600))
    surface.fill((255, 255, 255))
    PauseState(factory).draw(surface)
    r, g, b, _ = surface.get_at((0, 0))
    assert r < 255 and r == g == b


def test_settings_volume_text_after_update(factory, app):
    settings = SettingsState(factory)
    settings.update(app)
    assert settings.volume_text == "Volume: 50%"


def test_settings_volume_up_then_down_round_trip(factory, app):
    settings = SettingsState(factory)
    click(settings, app, button_named(settings, "VOLUME +"))
    raised = app.session.volume
    raised_text = settings.volume_text
    click(settings, app, button_named(settings, "VOLUME -"))
    assert raised == 60
    assert raised_text == "Volume: 60%"
    assert app.session.volume == 50
    assert settings.volume_text == "Volume: 50%"


def test_settings_volume_is_clamped(factory, app):
    settings = SettingsState(factory)
    up = button_named(settings, "VOLUME +")
    down = button_named(settings, "VOLUME -")
    for _ in range(20):
        click(settings, app, up)
    assert app.session.volume == MAX_VOLUME
    assert settings.volume_text == "Volume: 100%"
    for _ in range(20):
        click(settings, app, down)
    assert app.session.volume == MIN_VOLUME


def test_settings_back_and_escape(factory, app):
    settings = SettingsState(factory)
    click(settings, app, button_named(settings, "RETOUR"))
    settings.handle_event(key(pygame.K_ESCAPE), app)
    assert len(app.states) == 2
    assert all(isinstance(state, MainMenuState) for state in app.states)
    assert [labels(state) for state in app.states] == [MAIN_MENU_LABELS, MAIN_MENU_LABELS]


def test_tower_menu_with_enough_gold(factory, app):
    menu = TowerMenuState(factory)
    click(menu, app, button_named(menu, "TOUR BASIQUE (50 or)"))
    click(menu, app, button_named(menu, "TOUR SNIPER (100 or)"))
    assert labels(menu) == TOWER_MENU_LABELS
    assert len(app.states) == 2
    for state in app.states:
        assert_is_battle(state)
    assert app.session.gold == 100
    assert len(app.click.plays) == 2


def test_tower_menu_without_enough_gold(factory, app):
    app.session.gold = 0
    menu = TowerMenuState(factory)
    click(menu, app, button_named(menu, "TOUR BASIQUE (50 or)"))
    click(menu, app, button_named(menu, "TOUR SNIPER (100 or)"))
    assert labels(menu) == TOWER_MENU_LABELS
    assert app.states == []
    assert len(app.click.plays) == 2


def test_tower_menu_back_and_escape(factory, app):
    app.session.gold = 0
    menu = TowerMenuState(factory)
    click(menu, app, button_named(menu, "RETOUR"))
    menu.handle_event(key(pygame.K_ESCAPE), app)
    assert len(app.states) == 2
    for state in app.states:
        assert_is_battle(state)