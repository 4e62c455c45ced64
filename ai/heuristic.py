import math

import numpy as np


def evaluate(board):
    """탐색 깊이 끝에서 사용할 보드 평가 점수를 반환합니다."""
    return heuristic_score(
        board.get_score(),
        board.get_number_of_empty_cells(),
        clustering_score(board.board),
    )


def heuristic_score(actual_score, empty_cells, clustering):
    """
    실제 점수 + ln(실제 점수) * 빈칸 수 - 군집 점수.
    결과는 min(실제 점수, 1) 아래로 내려가지 않습니다.
    """
    log_term = math.log(actual_score) * empty_cells if actual_score > 0 else 0
    score = int(actual_score + log_term - clustering)
    return max(score, min(actual_score, 1))


def clustering_score(board):
    """
    군집 점수: 각 타일과 주변 8칸의 (비어있지 않은) 이웃 타일 값 차이의 평균을 모두 더합니다.
    인접 타일끼리 값이 비슷할수록(합치기 쉬울수록) 낮은 점수를 받습니다.
    """
    board = np.asarray(board)
    rows, cols = board.shape
    score = 0
    for (i, j), value in np.ndenumerate(board):
        if value == 0:
            continue

        window = board[max(i - 1, 0):min(i + 2, rows), max(j - 1, 0):min(j + 2, cols)]
        neighbors = window[window > 0]
        # 자기 자신은 차이가 0 이므로 합에는 영향이 없고, 개수에서만 뺍니다.
        num_of_neighbors = len(neighbors) - 1
        if num_of_neighbors == 0:
            continue
        score += int(np.abs(neighbors - value).sum()) // num_of_neighbors

    return score
