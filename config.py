import json
import logging
import math
import os

logger = logging.getLogger(__name__)

# --- 게임 보드 설정 ---
BOARD_SIZE = 4
NEW_TILE_VALUES = (2, 4)  # 탐색 시 Chance 노드가 시도하는 순서
FOUR_TILE_PROBABILITY = 0.1  # 새 타일이 4일 확률

# --- AI 설정 ---
DEFAULT_SEARCH_DEPTH = 3  # Alpha-Beta 탐색 깊이
DEFAULT_NUM_OF_GAMES = 10  # 정확도 측정 시 플레이할 게임 수
DEFAULT_TARGET_VALUE = 2048  # 승리 타일

# --- 설정 파일 ---
SETTINGS_FILE = os.environ.get(
    "A2048_SETTINGS", os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.json")
)


def _require_positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


class GameConfig:
    """보드 하나가 생성될 때 고정되는 게임 파라미터입니다."""

    __slots__ = ("_target_value", "_minimum_win_score")

    def __init__(self, target_value=DEFAULT_TARGET_VALUE):
        self._target_value = _require_positive_int("target_value", target_value)
        # 목표 타일에 도달했다면 최소한 이 정도 점수는 쌓여 있어야 합니다 (근사치).
        n = int(math.log2(target_value))
        self._minimum_win_score = target_value * (n - 1) - target_value

    @property
    def target_value(self):
        return self._target_value

    @property
    def minimum_win_score(self):
        return self._minimum_win_score

    def __eq__(self, other):
        return isinstance(other, GameConfig) and other._target_value == self._target_value

    def __hash__(self):
        return hash(self._target_value)

    def __repr__(self):
        return f"GameConfig(target_value={self._target_value})"


class Settings:
    """사용자가 조정할 수 있는 세 가지 값: 탐색 깊이, 게임 수, 목표 타일."""

    def __init__(self, depth=DEFAULT_SEARCH_DEPTH, num_of_games=DEFAULT_NUM_OF_GAMES,
                 target_value=DEFAULT_TARGET_VALUE):
        self.depth = _require_positive_int("depth", depth)
        self.num_of_games = _require_positive_int("num_of_games", num_of_games)
        self.target_value = _require_positive_int("target_value", target_value)

    def game_config(self):
        return GameConfig(self.target_value)

    def to_dict(self):
        return {
            "depth": self.depth,
            "num_of_games": self.num_of_games,
            "target_value": self.target_value,
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            raise ValueError(f"settings must be a JSON object, got {type(data).__name__}")
        return cls(
            depth=data.get("depth", DEFAULT_SEARCH_DEPTH),
            num_of_games=data.get("num_of_games", DEFAULT_NUM_OF_GAMES),
            target_value=data.get("target_value", DEFAULT_TARGET_VALUE),
        )

    def __eq__(self, other):
        return isinstance(other, Settings) and other.to_dict() == self.to_dict()

    def __repr__(self):
        return (f"Settings(depth={self.depth}, num_of_games={self.num_of_games}, "
                f"target_value={self.target_value})")


def load_settings(path=None):
    """
    JSON 파일에서 설정을 로드합니다.
    파일이 없으면 기본값을 반환합니다.
    """
    path = path or SETTINGS_FILE
    if not os.path.exists(path):
        logger.info("설정 파일 '%s'을(를) 찾을 수 없습니다. 기본값을 사용합니다.", path)
        return Settings()

    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"malformed settings file {path}: {e}") from e
    settings = Settings.from_dict(data)
    logger.debug("'%s'에서 설정을 로드했습니다: %r", path, settings)
    return settings


def save_settings(settings, path=None):
    path = path or SETTINGS_FILE
    with open(path, "w") as f:
        json.dump(settings.to_dict(), f, indent=2)
    logger.info("설정을 '%s'에 저장했습니다: %r", path, settings)


def update_settings(path=None, depth=None, num_of_games=None, target_value=None):
    """
    저장된 설정 중 일부만 바꿉니다.
    None 이거나 양수가 아닌 값은 무시하고 기존 값을 유지합니다.
    """
    current = load_settings(path).to_dict()
    changes = {"depth": depth, "num_of_games": num_of_games, "target_value": target_value}
    for key, value in changes.items():
        if value is not None and value > 0:
            current[key] = value
    settings = Settings.from_dict(current)
    save_settings(settings, path)
    return settings
