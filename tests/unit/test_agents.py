"""
Unit tests for agents: properties, the environment and the player.
"""
import pytest
import numpy as np

from tilegame.ai.agents import Agent, Player, RandomAgent, RandomEnvironment
from tilegame.ai.agents.base import parse_properties
from tilegame.ai.strategies.search_strategies import HeuristicStrategy
from tilegame.ai.strategies.simple_strategies import GreedyStrategy, RandomStrategy
from tilegame.core.action import Place, Slide
from tilegame.core.board import Board, Direction


class TestProperties:
    """Tests for key=value property handling."""

    def test_parse(self):
        """Test parsing key=value pairs."""
        assert parse_properties("a=1 b=x  c=") == {"a": "1", "b": "x", "c": ""}

    def test_later_pairs_override(self):
        """Test that later pairs win."""
        assert parse_properties("name=a name=b") == {"name": "b"}

    def test_value_may_contain_equals(self):
        """Test that only the first '=' splits."""
        assert parse_properties("expr=a=b") == {"expr": "a=b"}

    def test_malformed_pair(self):
        """Test that pairs without a key or '=' are rejected."""
        with pytest.raises(ValueError):
            parse_properties("seed=1 greedy")
        with pytest.raises(ValueError):
            Agent("=value")

    def test_defaults(self):
        """Test the default name and role."""
        agent = Agent()
        assert agent.name() == "unknown"
        assert agent.role() == "unknown"

    def test_missing_property(self):
        """Test that a missing property raises KeyError."""
        with pytest.raises(KeyError):
            Agent().property("seed")

    def test_numeric_property(self):
        """Test numeric lookups and their errors."""
        agent = Agent("seed=42 ratio=0.5 label=abc")
        assert agent.numeric_property("seed") == 42
        assert agent.numeric_property("ratio") == 0.5
        with pytest.raises(ValueError):
            agent.numeric_property("label")
        with pytest.raises(KeyError):
            agent.numeric_property("missing")

    def test_notify(self):
        """Test updating properties at runtime."""
        agent = Agent("name=first")
        agent.notify("name=second")
        agent.notify("winner=yes")
        assert agent.name() == "second"
        assert agent.property("winner") == "yes"

    def test_base_agent_hooks(self):
        """Test the no-op behaviour of the base agent."""
        agent = Agent()
        agent.open_episode()
        agent.close_episode()
        assert agent.take_action(Board()) is None
        assert agent.check_for_win(Board()) is False


class TestRandomAgent:
    """Tests for RandomAgent seeding."""

    def test_seeded(self):
        """Test that equal seeds give equal streams."""
        a = RandomAgent("seed=3")
        b = RandomAgent("seed=3")
        assert a.rng.integers(1000, size=5).tolist() == b.rng.integers(1000, size=5).tolist()

    def test_unseeded(self):
        """Test the generator without a seed."""
        assert isinstance(RandomAgent().rng, np.random.Generator)

    def test_bad_seed(self):
        """Test that a non-numeric seed is rejected."""
        with pytest.raises(ValueError):
            RandomAgent("seed=abc")


class TestRandomEnvironment:
    """Tests for RandomEnvironment."""

    def test_identity(self):
        """Test the environment's default name and role."""
        env = RandomEnvironment()
        assert env.name() == "random"
        assert env.role() == "environment"
        assert RandomEnvironment("name=evil").name() == "evil"

    def test_places_on_empty_cell(self):
        """Test filling the board one empty cell at a time."""
        env = RandomEnvironment("seed=1")
        board = Board()
        for _ in range(16):
            empty = set(board.empty_positions())
            action = env.take_action(board)
            assert isinstance(action, Place)
            assert action.position in empty
            assert action.tile in (RandomEnvironment.LOW_TILE, RandomEnvironment.HIGH_TILE)
            assert action.apply(board) == 0

        assert board.get_empty_cells() == 0
        assert env.take_action(board) is None

    def test_does_not_mutate_board(self):
        """Test that choosing a placement leaves the board alone."""
        board = Board()
        board[3] = 2
        before = board.to_array()
        RandomEnvironment("seed=2").take_action(board)
        assert np.array_equal(board.grid, before)

    def test_high_tile_frequency(self):
        """Test that about 10% of tiles are high tiles."""
        env = RandomEnvironment("seed=12345")
        draws = 5000
        high = sum(env.take_action(Board()).tile == RandomEnvironment.HIGH_TILE for _ in range(draws))
        assert abs(high / draws - 0.1) < 0.02

    def test_positions_spread(self):
        """Test that every cell can receive a tile."""
        env = RandomEnvironment("seed=8")
        positions = {env.take_action(Board()).position for _ in range(500)}
        assert positions == set(range(16))

    def test_same_seed_same_actions(self):
        """Test that equal seeds give equal placements."""
        a = RandomEnvironment("seed=5")
        b = RandomEnvironment("seed=5")
        board = Board()
        assert [a.take_action(board) for _ in range(20)] == [b.take_action(board) for _ in range(20)]


class TestPlayer:
    """Tests for Player."""

    def test_identity(self):
        """Test the player's default name and role."""
        player = Player()
        assert player.name() == "dummy"
        assert player.role() == "player"

    def test_default_play_is_random(self):
        """Test that the default play mode is random."""
        player = Player()
        assert player.play_type == "random"
        assert isinstance(player.strategy, RandomStrategy)

    def test_play_modes(self):
        """Test selecting greedy and heuristic play."""
        assert isinstance(Player("play=greedy").strategy, GreedyStrategy)
        assert isinstance(Player("play=heuristic").strategy, HeuristicStrategy)

    def test_unknown_play_mode(self):
        """Test that an unknown play mode is rejected."""
        with pytest.raises(ValueError):
            Player("play=minimax")

    def test_depth(self):
        """Test the depth property."""
        assert Player("play=heuristic").strategy.depth == 1
        assert Player("play=heuristic depth=2").strategy.depth == 2

    def test_depth_must_be_whole_number(self):
        """Test that a fractional depth is rejected instead of truncated."""
        with pytest.raises(ValueError, match="depth"):
            Player("play=heuristic depth=0.9")
        assert Player("play=heuristic depth=2.0").strategy.depth == 2

    def test_strategy_shares_rng(self):
        """Test that the strategy draws from the player's generator."""
        player = Player("seed=1")
        assert player.strategy.rng is player.rng

    def test_take_action(self):
        """Test each play mode on a corner board."""
        board = Board()
        board[0] = 1
        for mode in ("random", "greedy", "heuristic"):
            action = Player(f"play={mode} seed=0").take_action(board)
            assert isinstance(action, Slide)
            assert action.direction in (Direction.RIGHT, Direction.DOWN)

    def test_stuck_board(self):
        """Test that every play mode gives up on a stuck board."""
        grid = [[2 if (r + c) % 2 == 0 else 4 for c in range(4)] for r in range(4)]
        board = Board(np.array(grid))
        for mode in ("random", "greedy", "heuristic"):
            assert Player(f"play={mode}").take_action(board) is None

    def test_open_episode_resets_strategy(self):
        """Test that a new episode clears move explanations."""
        player = Player("play=greedy")
        board = Board()
        board[0] = 1
        player.take_action(board)
        assert player.strategy.move_explanations
        player.open_episode()
        assert player.strategy.move_explanations == []
