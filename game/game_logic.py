import logging
import random
from enum import Enum, IntEnum

import numpy as np

import config
from config import GameConfig

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """플레이어의 움직임. 열거 순서(상, 우, 하, 좌)가 곧 탐색 순서입니다."""
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3


class ActionStatus(Enum):
    CONTINUE = "continue"
    INVALID_MOVE = "invalid_move"
    WIN = "win"
    NO_MORE_MOVES = "no_more_moves"


# 움직임 방향이 "각 행의 0번 열 쪽"이 되도록 np.rot90 에 넘길 회전 횟수 (반시계 방향)
_ROTATIONS = {
    Direction.LEFT: 0,
    Direction.UP: 1,
    Direction.RIGHT: 2,
    Direction.DOWN: 3,
}


def _is_tile_value(value):
    """0(빈칸) 이거나 2 이상의 2의 거듭제곱인지 확인합니다."""
    return value == 0 or (value >= 2 and value & (value - 1) == 0)


class Board:
    def __init__(self, game_config=None, seed=None, size=config.BOARD_SIZE):
        """새 보드를 만들고 무작위 타일 두 개를 배치합니다."""
        self.size = size
        self.config = game_config or GameConfig()
        self.board = np.zeros((self.size, self.size), dtype=int)
        self.score = 0
        self._random = random.Random(seed)
        self._empty_cells_cache = None

        self.add_random_cell()
        self.add_random_cell()

    @classmethod
    def from_grid(cls, grid, score=0, game_config=None, seed=None):
        """주어진 배열로 보드를 만듭니다. 무작위 타일은 추가하지 않습니다."""
        grid = np.array(grid, dtype=int)
        assert grid.ndim == 2 and grid.shape[0] == grid.shape[1], f"square grid expected, got {grid.shape}"
        assert all(_is_tile_value(int(v)) for v in grid.flat), f"not a tile grid:\n{grid}"
        assert score >= 0

        board = cls.__new__(cls)
        board.size = grid.shape[0]
        board.config = game_config or GameConfig()
        board.board = grid
        board.score = int(score)
        board._random = random.Random(seed)
        board._empty_cells_cache = None
        return board

    def clone(self):
        """AI 시뮬레이션을 위한 깊은 복사본을 만듭니다. 원본과 공유하는 가변 상태는 없습니다."""
        new_board = Board.__new__(Board)
        new_board.size = self.size
        new_board.config = self.config  # 불변 값
        new_board.board = np.copy(self.board)
        new_board.score = self.score
        new_board._random = random.Random()
        new_board._random.setstate(self._random.getstate())
        new_board._empty_cells_cache = self._empty_cells_cache
        return new_board

    def get_score(self):
        return self.score

    def get_board_array(self):
        """현재 보드의 복사본을 반환합니다. 반환값을 수정해도 보드에는 영향이 없습니다."""
        return np.copy(self.board)

    def get_max_tile(self):
        return int(np.max(self.board))

    def get_minimum_score(self):
        return self.config.minimum_win_score

    @staticmethod
    def is_equal(board_a, board_b):
        return np.array_equal(board_a, board_b)

    def move(self, direction):
        """
        보드를 주어진 방향으로 밀고, 이번 움직임에서 합쳐진 점수를 반환합니다.
        새 타일은 추가하지 않습니다 (action() 참고).
        """
        direction = Direction(direction)
        rotated_board = np.rot90(self.board, k=_ROTATIONS[direction])
        new_board, points = self._move_left(rotated_board)
        self.board = np.ascontiguousarray(np.rot90(new_board, k=-_ROTATIONS[direction]))
        self._empty_cells_cache = None

        self.score += points
        return points

    def _move_left(self, board):
        """
        각 행을 왼쪽으로 압축합니다.
        한 번 합쳐진 칸은 같은 움직임 안에서 다시 합쳐지지 않습니다.
        """
        rows = board.tolist()
        points = 0
        for row in rows:
            last_merge_position = 0  # 이 위치보다 왼쪽으로는 이동/병합 불가
            for j in range(1, self.size):
                if row[j] == 0:
                    continue

                previous = j - 1
                while previous > last_merge_position and row[previous] == 0:
                    previous -= 1

                if row[previous] == 0:
                    row[previous] = row[j]
                    row[j] = 0
                elif row[previous] == row[j]:
                    row[previous] *= 2
                    row[j] = 0
                    points += row[previous]
                    last_merge_position = previous + 1
                elif previous + 1 != j:
                    row[previous + 1] = row[j]
                    row[j] = 0
        return np.array(rows, dtype=int), points

    def get_empty_cell_ids(self):
        """비어있는 칸의 id(row * size + col)를 오름차순 리스트로 반환합니다."""
        return [int(i) for i in np.flatnonzero(self.board == 0)]

    def get_number_of_empty_cells(self):
        if self._empty_cells_cache is None:
            self._empty_cells_cache = len(self.get_empty_cell_ids())
        return self._empty_cells_cache

    def has_won(self):
        if self.score < self.config.minimum_win_score:
            return False
        return bool(np.any(self.board >= self.config.target_value))

    def is_game_terminated(self):
        """
        승리했거나, 보드가 가득 찬 상태에서 어느 방향으로도 점수를 얻을 수 없으면 종료입니다.
        가득 찬 경우에만 복사본으로 네 방향을 시험해 봅니다.
        """
        if self.has_won():
            return True
        if self.get_number_of_empty_cells() != 0:
            return False

        trial_board = self.clone()
        return all(trial_board.move(direction) == 0 for direction in Direction)

    def set_empty_cell(self, row, col, value):
        """빈칸일 때만 값을 씁니다."""
        assert _is_tile_value(value) and value != 0, f"invalid tile value {value}"
        if self.board[row, col] == 0:
            self.board[row, col] = value
            self._empty_cells_cache = None

    def add_random_cell(self):
        """비어있는 칸 하나에 새 타일(2 또는 4)을 추가합니다. 빈칸이 없으면 False."""
        empty_cells = self.get_empty_cell_ids()
        if not empty_cells:
            return False

        cell_id = self._random.choice(empty_cells)
        value = 4 if self._random.random() < config.FOUR_TILE_PROBABILITY else 2
        self.set_empty_cell(cell_id // self.size, cell_id % self.size, value)
        return True

    def action(self, direction):
        """
        실제 게임에서 한 수를 둡니다: 이동 후 보드가 바뀌었으면 새 타일을 추가하고
        결과 상태를 반환합니다.
        """
        original_board = self.get_board_array()
        points = self.move(direction)

        cell_added = False
        if not self.is_equal(original_board, self.board):
            cell_added = self.add_random_cell()

        if points == 0 and not cell_added:
            if self.is_game_terminated():
                status = ActionStatus.NO_MORE_MOVES
            else:
                status = ActionStatus.INVALID_MOVE
        elif self.has_won():
            status = ActionStatus.WIN
        elif self.is_game_terminated():
            status = ActionStatus.NO_MORE_MOVES
        else:
            status = ActionStatus.CONTINUE

        logger.debug("action %s: +%d points, status=%s", Direction(direction).name, points, status.name)
        return status

    def __repr__(self):
        return f"Board(score={self.score}, config={self.config!r})\n{self}"

    def __str__(self):
        return "\n".join(" ".join(f"{v:5d}" for v in row) for row in self.board.tolist())
