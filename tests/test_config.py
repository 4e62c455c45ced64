import json

import pytest

import config
from config import GameConfig, Settings, load_settings, save_settings, update_settings


def test_minimum_win_score():
    assert GameConfig(2048).minimum_win_score == 18432
    assert GameConfig(16).minimum_win_score == 32
    assert GameConfig().target_value == config.DEFAULT_TARGET_VALUE


@pytest.mark.parametrize("value", [0, -8, 2.5, "2048", True, None])
def test_game_config_rejects_bad_target(value):
    with pytest.raises(ValueError):
        GameConfig(value)


def test_game_config_is_a_value():
    assert GameConfig(512) == GameConfig(512)
    assert GameConfig(512) != GameConfig(1024)
    assert len({GameConfig(64), GameConfig(64)}) == 1
    with pytest.raises(AttributeError):
        GameConfig(64).target_value = 128


@pytest.mark.parametrize("field", ["depth", "num_of_games", "target_value"])
def test_settings_reject_non_positive(field):
    with pytest.raises(ValueError):
        Settings(**{field: 0})


def test_missing_settings_file_gives_defaults(tmp_path):
    assert load_settings(str(tmp_path / "missing.json")) == Settings()


def test_save_and_load(tmp_path):
    path = str(tmp_path / "settings.json")
    save_settings(Settings(depth=5, num_of_games=3, target_value=512), path)
    with open(path) as f:
        assert json.load(f) == {"depth": 5, "num_of_games": 3, "target_value": 512}
    assert load_settings(path) == Settings(5, 3, 512)


def test_update_keeps_non_positive_values(tmp_path):
    path = str(tmp_path / "settings.json")
    save_settings(Settings(depth=4, num_of_games=2, target_value=256), path)

    updated = update_settings(path, depth=-1, num_of_games=7, target_value=0)

    assert updated == Settings(4, 7, 256)
    assert load_settings(path) == updated


def test_malformed_settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_settings(str(path))

    path.write_text(json.dumps({"depth": -3}))
    with pytest.raises(ValueError):
        load_settings(str(path))


def test_settings_game_config():
    assert Settings(target_value=64).game_config() == GameConfig(64)
