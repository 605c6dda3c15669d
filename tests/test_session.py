import pytest

from towerdefense.resources import ResourceError, ResourceManager
from towerdefense.session import (
    DEFAULT_VOLUME,
    STARTING_GOLD,
    STARTING_LIVES,
    STARTING_SCORE,
    STARTING_WAVE,
    Session,
)


class FakeSound:
    def __init__(self):
        self.plays = []
        self.volumes = []

    def play(self, **kwargs):
        self.plays.append(kwargs)

    def set_volume(self, value):
        self.volumes.append(value)


@pytest.fixture
def sounds():
    return {name: FakeSound() for name in ("ambiance", "click", "victory", "defeat")}


def test_defaults_match_the_game_rules():
    session = Session()
    assert session.gold == 100
    assert session.lives == 10
    assert session.score == 0
    assert session.wave == 1
    assert session.volume == 50.0
    assert (STARTING_GOLD, STARTING_LIVES, STARTING_SCORE, STARTING_WAVE, DEFAULT_VOLUME) == (
        session.gold,
        session.lives,
        session.score,
        session.wave,
        session.volume,
    )


def test_gold_add_and_spend():
    session = Session()
    session.add_gold(20)
    assert session.gold == STARTING_GOLD + 20
    session.spend_gold(50)
    assert session.gold == STARTING_GOLD + 20 - 50


def test_spend_gold_never_goes_negative():
    session = Session()
    session.spend_gold(STARTING_GOLD + 500)
    assert session.gold == 0


def test_lives_score_and_wave():
    session = Session()
    session.lose_life()
    session.lose_life()
    session.add_score(100)
    session.next_wave()
    assert session.lives == STARTING_LIVES - 2
    assert session.score == 100
    assert session.wave == STARTING_WAVE + 1


@pytest.mark.parametrize("value, expected", [(-10, 0.0), (150, 100.0), (40, 40.0)])
def test_volume_is_clamped(value, expected):
    session = Session()
    session.volume = value
    assert session.volume == expected


def test_sounds_get_initial_volume(sounds):
    Session(sounds)
    for sound in sounds.values():
        assert sound.volumes == [DEFAULT_VOLUME / 100]


def test_volume_change_only_touches_ambiance(sounds):
    session = Session(sounds)
    session.volume = 100
    assert sounds["ambiance"].volumes[-1] == 1.0
    assert sounds["click"].volumes == [DEFAULT_VOLUME / 100]


def test_play_methods(sounds):
    session = Session(sounds)
    session.play_click()
    session.play_victory()
    session.play_defeat()
    session.play_ambiance()
    assert sounds["click"].plays == [{}]
    assert sounds["victory"].plays == [{}]
    assert sounds["defeat"].plays == [{}]
    assert sounds["ambiance"].plays == [{"loops": -1}]


def test_missing_sounds_are_silent():
    session = Session({})
    session.play_click()
    session.volume = 30
    assert session.volume == 30.0


def test_from_resources_reports_missing_sounds(tmp_path, capsys):
    (tmp_path / "click.wav").write_text("click")
    loaded = []

    def loader(path):
        with open(path) as handle:
            loaded.append(path)
            handle.read()
        return FakeSound()

    resources = ResourceManager(sound_loader=loader)
    session = Session.from_resources(resources, tmp_path)
    assert loaded == [str(tmp_path / "click.wav")]
    assert "Erreur chargement des sons." in capsys.readouterr().err
    session.play_click()
    with pytest.raises(ResourceError):
        resources.get_sound(str(tmp_path / "victory.wav"))