import logging
import sys
import time
from collections import namedtuple
from enum import Enum

import config
from game.game_logic import Direction
from .base_ai import BaseAI
from .heuristic import evaluate

logger = logging.getLogger(__name__)

MAX_SCORE = sys.maxsize
MIN_SCORE = -sys.maxsize - 1

SearchResult = namedtuple("SearchResult", ["direction", "score"])


class Player(Enum):
    USER = "user"  # 방향을 고르는 쪽 (Max)
    COMPUTER = "computer"  # 새 타일을 놓는 쪽, 최악의 경우로 가정 (Min)


def terminal_score(board):
    """종료된 보드의 점수: 승리면 최대값, 아니면 사실상 최저점."""
    if board.has_won():
        return MAX_SCORE
    return min(board.get_score(), 1)


class AlphaBetaAI(BaseAI):
    def __init__(self, depth=config.DEFAULT_SEARCH_DEPTH):
        self.depth = depth
        self.nodes_visited = 0

    def get_move(self, board):
        start = time.time()
        result = self.search(board)
        analysis_data = {
            "score": result.score,
            "depth": self.depth,
            "nodes": self.nodes_visited,
            "think_time": time.time() - start,
        }
        return result.direction, analysis_data

    def search(self, board):
        """최대 윈도우 [MIN_SCORE, MAX_SCORE]로 USER 차례부터 탐색합니다."""
        self.nodes_visited = 0
        result = self.alphabeta(board, self.depth, MIN_SCORE, MAX_SCORE, Player.USER)
        logger.debug("depth=%d best=%s score=%d nodes=%d", self.depth,
                     result.direction.name if result.direction is not None else None,
                     result.score, self.nodes_visited)
        return result

    def alphabeta(self, board, depth, alpha, beta, player):
        self.nodes_visited += 1

        if board.is_game_terminated():
            return SearchResult(None, terminal_score(board))
        if depth == 0:
            return SearchResult(None, evaluate(board))

        if player == Player.USER:
            best_direction = None
            for direction in Direction:
                new_board = board.clone()
                points = new_board.move(direction)
                if points == 0 and board.is_equal(board.board, new_board.board):
                    continue  # 아무것도 움직이지 않는 수

                score = self.alphabeta(new_board, depth - 1, alpha, beta, Player.COMPUTER).score
                if score > alpha:
                    alpha = score
                    best_direction = direction
                if beta <= alpha:
                    break  # beta cutoff
            return SearchResult(best_direction, alpha)

        empty_cells = board.get_empty_cell_ids()
        if not empty_cells:
            return SearchResult(None, 0)

        for cell_id in empty_cells:
            row, col = divmod(cell_id, board.size)
            for value in config.NEW_TILE_VALUES:
                new_board = board.clone()
                new_board.set_empty_cell(row, col, value)

                score = self.alphabeta(new_board, depth - 1, alpha, beta, Player.USER).score
                beta = min(beta, score)
                if beta <= alpha:
                    return SearchResult(None, beta)  # alpha cutoff
        return SearchResult(None, beta)


def find_best_move(board, depth):
    """현재 보드에서 depth 만큼 탐색한 최선의 방향. 둘 수 있는 수가 없으면 None."""
    return AlphaBetaAI(depth).search(board).direction
