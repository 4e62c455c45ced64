
class BaseAI:
    """모든 AI 클래스가 상속받을 기본 클래스입니다."""
    def get_move(self, board):
        """
        주어진 보드 상태를 기반으로 최적의 움직임을 결정합니다.

        Args:
            board (Board): 현재 게임 상태. 이 메소드는 보드를 변경하지 않아야 합니다.

        Returns:
            Direction | None: 둘 수 있는 수가 없으면 None.
            dict: 분석 데이터 (점수, 탐색 노드 수 등).
        """
        raise NotImplementedError("이 메소드는 서브클래스에서 반드시 구현되어야 합니다.")
