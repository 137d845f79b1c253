"""
Benchmark all play modes to see current performance levels.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tilegame.ai.arena import Arena
from tilegame.ai.strategies import STRATEGIES


def benchmark(n_games=20, seed=0):
    """Benchmark all play modes."""
    print(f"Benchmarking {len(STRATEGIES)} play modes over {n_games} games each...\n")

    arena = Arena(seed=seed)
    arena.run_benchmark(list(STRATEGIES), num_games=n_games)
    leaderboard = arena.get_leaderboard()

    print(f"{'Play mode':<20} {'Mean':>8} {'Max':>8} {'Min':>8} {'Std':>8} {'Moves':>8} {'Tile':>8}")
    print("=" * 80)

    for stats in leaderboard:
        print(f"{stats['play_mode']:<20} {stats['avg_score']:>8.0f} {stats['max_score']:>8.0f} "
              f"{stats['min_score']:>8.0f} {stats['score_std']:>8.1f} {stats['avg_turns']:>8.1f} "
              f"{stats['max_tile_ever']:>8}")

    return leaderboard


if __name__ == "__main__":
    benchmark()
