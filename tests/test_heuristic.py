import math

from ai.heuristic import clustering_score, evaluate, heuristic_score
from game.game_logic import Board

EMPTY = [0, 0, 0, 0]


def test_isolated_tile_has_no_clustering():
    assert clustering_score([[0, 0, 0, 0], [0, 8, 0, 0], EMPTY, EMPTY]) == 0


def test_tiles_out_of_reach_have_no_clustering():
    assert clustering_score([[2, 0, 0, 0], EMPTY, EMPTY, [0, 0, 0, 1024]]) == 0


def test_clustering_of_a_pair():
    assert clustering_score([[2, 4, 0, 0], EMPTY, EMPTY, EMPTY]) == 4


def test_clustering_counts_diagonal_neighbors():
    # (0,0): (0+6)/2, (0,1): (0+6)/2 via the diagonal, (1,0): 12/2
    assert clustering_score([[2, 2, 0, 0], [8, 0, 0, 0], EMPTY, EMPTY]) == 12


def test_clustering_uses_integer_mean():
    grid = [[2, 4, 0, 0], [8, 16, 0, 0], EMPTY, EMPTY]
    # 22 // 3 + 18 // 3 + 18 // 3 + 34 // 3
    assert clustering_score(grid) == 7 + 6 + 6 + 11


def test_equal_tiles_do_not_cluster():
    assert clustering_score([[4, 4, 4, 4]] * 4) == 0


def test_heuristic_formula():
    expected = int(100 + math.log(100) * 2 - 10)
    assert heuristic_score(100, 2, 10) == expected == 99


def test_heuristic_is_floored():
    assert heuristic_score(100, 0, 500) == 1
    assert heuristic_score(0, 14, 0) == 0
    assert heuristic_score(0, 0, 30) == 0


def test_evaluate_board():
    board = Board.from_grid([[2, 4, 0, 0], EMPTY, EMPTY, EMPTY], score=16)
    assert evaluate(board) == int(16 + math.log(16) * 14 - 4)
