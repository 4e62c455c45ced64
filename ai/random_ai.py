from .base_ai import BaseAI
from game.game_logic import Direction
import random

class RandomAI(BaseAI):
    """보드를 바꾸는 움직임 중 하나를 무작위로 고르는 간단한 AI입니다."""
    def __init__(self, seed=None):
        self._random = random.Random(seed)

    def get_move(self, board):
        valid_moves = []
        for direction in Direction:
            temp_board = board.clone()
            temp_board.move(direction)
            if not board.is_equal(board.board, temp_board.board):
                valid_moves.append(direction)

        if not valid_moves:
            return None, {}
        return self._random.choice(valid_moves), {"valid_moves": valid_moves}
