import time

import config
from game.game_logic import Direction
from .alphabeta_ai import MIN_SCORE, Player, SearchResult, terminal_score
from .base_ai import BaseAI
from .heuristic import evaluate


class MinimaxAI(BaseAI):
    """
    가지치기 없이 같은 게임 트리를 전부 탐색하는 Minimax AI입니다.
    AlphaBetaAI와 같은 결과를 내야 하므로 비교 기준으로 사용합니다.
    """
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
        self.nodes_visited = 0
        return self.minimax(board, self.depth, Player.USER)

    def minimax(self, board, depth, player):
        self.nodes_visited += 1

        if board.is_game_terminated():
            return SearchResult(None, terminal_score(board))
        if depth == 0:
            return SearchResult(None, evaluate(board))

        if player == Player.USER:
            best_direction, best_score = None, MIN_SCORE
            for direction in Direction:
                new_board = board.clone()
                points = new_board.move(direction)
                if points == 0 and board.is_equal(board.board, new_board.board):
                    continue

                score = self.minimax(new_board, depth - 1, Player.COMPUTER).score
                if score > best_score:
                    best_score = score
                    best_direction = direction
            return SearchResult(best_direction, best_score)

        empty_cells = board.get_empty_cell_ids()
        if not empty_cells:
            return SearchResult(None, 0)

        scores = []
        for cell_id in empty_cells:
            row, col = divmod(cell_id, board.size)
            for value in config.NEW_TILE_VALUES:
                new_board = board.clone()
                new_board.set_empty_cell(row, col, value)
                scores.append(self.minimax(new_board, depth - 1, Player.USER).score)
        return SearchResult(None, min(scores))
