import argparse
import logging
import sys
import time
from collections import namedtuple

import config
from config import Settings, load_settings, update_settings
from game.game_logic import ActionStatus, Board
from ai.alphabeta_ai import AlphaBetaAI
from ai.minimax_ai import MinimaxAI
from ai.random_ai import RandomAI

logger = logging.getLogger("2048-AI-SOLVER")

GameResult = namedtuple("GameResult", ["won", "score", "max_tile", "moves", "elapsed", "minimum_score"])

AI_FACTORIES = {
    "alphabeta": lambda settings, seed: AlphaBetaAI(depth=settings.depth),
    "minimax": lambda settings, seed: MinimaxAI(depth=settings.depth),
    "random": lambda settings, seed: RandomAI(seed=seed),
}


def play_game(ai, game_config, seed=None):
    """한 게임을 끝까지 진행하고 결과를 반환합니다."""
    start = time.time()
    board = Board(game_config, seed=seed)
    moves = 0
    status = ActionStatus.CONTINUE

    while status in (ActionStatus.CONTINUE, ActionStatus.INVALID_MOVE):
        if board.is_game_terminated():
            status = ActionStatus.WIN if board.has_won() else ActionStatus.NO_MORE_MOVES
            break

        move, _ = ai.get_move(board)
        if move is None:
            # 둘 수 있는 수가 없으면 같은 보드로 계속 물어봐도 결과는 같습니다.
            status = ActionStatus.WIN if board.has_won() else ActionStatus.NO_MORE_MOVES
            break

        status = board.action(move)
        moves += 1

    return GameResult(
        won=status == ActionStatus.WIN,
        score=board.get_score(),
        max_tile=board.get_max_tile(),
        moves=moves,
        elapsed=time.time() - start,
        minimum_score=board.get_minimum_score(),
    )


def run_trials(ai, settings, seed=None):
    """settings.num_of_games 만큼 게임을 돌려 결과 리스트를 반환합니다."""
    game_config = settings.game_config()
    logger.info("Running %d games to estimate the accuracy (depth=%d, target=%d)",
                settings.num_of_games, settings.depth, settings.target_value)

    results = []
    for i in range(settings.num_of_games):
        game_seed = None if seed is None else seed + i
        result = play_game(ai, game_config, seed=game_seed)
        results.append(result)

        if result.won:
            logger.info("Game %d - won in %.2f seconds, score = %d, over the min score by: %d",
                        i + 1, result.elapsed, result.score, result.score - result.minimum_score)
        else:
            logger.info("Game %d - lost in %.2f seconds, score = %d, under the min score by: %d",
                        i + 1, result.elapsed, result.score, result.minimum_score - result.score)
    return results


def summarize(results):
    total = len(results)
    if total == 0:
        return {"wins": 0, "games": 0, "avg_time": 0.0, "avg_score": 0.0, "success_rate": 0.0}

    wins = sum(1 for r in results if r.won)
    return {
        "wins": wins,
        "games": total,
        "avg_time": round(sum(r.elapsed for r in results) / total, 2),
        "avg_score": round(sum(r.score for r in results) / total, 2),
        "success_rate": round(wins / total * 100.0, 2),
    }


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not an integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} must be a positive integer")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description="2048 AI Solver - Alpha-Beta pruning search")
    parser.add_argument('--settings', default=None,
                        help=f"Settings file (default: {config.SETTINGS_FILE})")
    parser.add_argument('--verbose', action='store_true', help="Enable debug logging")
    subparsers = parser.add_subparsers(dest='command')

    play = subparsers.add_parser('play', help="Estimate the accuracy of the AI solver")
    play.add_argument('--depth', type=positive_int, help="Search depth (overrides settings)")
    play.add_argument('--games', type=positive_int, help="Number of games (overrides settings)")
    play.add_argument('--target', type=positive_int, help="Winning tile (overrides settings)")
    play.add_argument('--ai', choices=sorted(AI_FACTORIES), default='alphabeta')
    play.add_argument('--seed', type=int, default=None, help="Random seed for reproducible games")

    change = subparsers.add_parser('set', help="Change stored settings (non-positive keeps the current value)")
    change.add_argument('--depth', type=int)
    change.add_argument('--games', type=int)
    change.add_argument('--target', type=int)

    subparsers.add_parser('show', help="Print stored settings")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # --- 로깅 설정 ---
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )

    if args.command == 'set':
        settings = update_settings(args.settings, depth=args.depth,
                                   num_of_games=args.games, target_value=args.target)
        print(settings)
        return 0

    settings = load_settings(args.settings)
    if args.command == 'show':
        print(settings)
        return 0

    if args.command == 'play':
        settings = Settings(
            depth=args.depth or settings.depth,
            num_of_games=args.games or settings.num_of_games,
            target_value=args.target or settings.target_value,
        )
        ai = AI_FACTORIES[args.ai](settings, args.seed)
        stats = summarize(run_trials(ai, settings, seed=args.seed))

        logger.info("%d wins out of %d games.", stats["wins"], stats["games"])
        logger.info("completed %d games in an avg time of: %.2f seconds", stats["games"], stats["avg_time"])
        logger.info("completed %d games with an avg score of: %.2f", stats["games"], stats["avg_score"])
        logger.info("completed %d games with a success rate of: %.2f%%", stats["games"], stats["success_rate"])
        return 0

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
