"""
Demo script to try the board and the agents.
"""
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from tilegame.ai.agents import Player, RandomEnvironment
from tilegame.ai.strategies import BoardEvaluator, list_strategies
from tilegame.core.game import play_episode


def demo_strategies():
    """List the available play modes."""
    print("=" * 60)
    print("AVAILABLE PLAY MODES")
    print("=" * 60)

    for info in list_strategies():
        print(f"\n{info.id} ({info.category})")
        print(f"  {info.short_desc}")
        print(f"  Complexity: {info.complexity}")


def demo_agents(num_games=20):
    """Compare the play modes over the same seeded games."""
    print("\n" + "=" * 60)
    print("AGENT COMPARISON")
    print("=" * 60)

    averages = {}
    for info in list_strategies():
        scores = []
        for i in range(num_games):
            player = Player(f"play={info.id} seed={i}")
            environment = RandomEnvironment(f"seed={i}")
            game = play_episode(player, environment)
            scores.append(game.get_score())

        averages[info.id] = sum(scores) / len(scores)
        print(f"\n{info.name} ({num_games} games):")
        print(f"  Average Score: {averages[info.id]:.1f}")
        print(f"  Max Score: {max(scores)}")
        print(f"  Min Score: {min(scores)}")

    improvement = (averages["heuristic"] / averages["random"] - 1) * 100
    print(f"\nHeuristic improvement over random: {improvement:+.1f}%")


def demo_single_game_with_heuristic(max_turns=50):
    """Play one game with the heuristic player showing moves."""
    print("\n" + "=" * 60)
    print("HEURISTIC PLAYER SINGLE GAME")
    print("=" * 60)

    player = Player("play=heuristic seed=123")
    environment = RandomEnvironment("seed=123")
    game = play_episode(player, environment, max_turns=max_turns, verbose=True)

    print(f"\nFinal Score: {game.get_score()}")
    print(f"Total Turns: {game.turn_count}")
    print(f"Evaluation: {BoardEvaluator().evaluate(game.board)}")


if __name__ == "__main__":
    print("2584 Puzzle Agents - Demo")
    print("=" * 60)

    # Uncomment the demos you want to run:

    demo_strategies()
    demo_agents()
    # demo_single_game_with_heuristic()

    print("\n" + "=" * 60)
    print("Demo complete!")
