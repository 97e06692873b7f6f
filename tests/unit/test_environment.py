"""
Unit tests for the Gymnasium environment and agents.
"""
import pytest
import numpy as np
from agents import RandomAgent
from game import Board, MinesweeperEngine, MinesweeperEnv, generate_board


@pytest.fixture
def env(engine: MinesweeperEngine) -> MinesweeperEnv:
    """Easy environment sharing the test engine."""
    return MinesweeperEnv("Easy", engine=engine, render_mode="ansi")


# ============================================================================
# Environment Tests
# ============================================================================

class TestMinesweeperEnv:
    """Test the RL interface over engine sessions."""

    def test_spaces_match_difficulty(self, env: MinesweeperEnv) -> None:
        """Action and observation spaces follow the board size."""
        assert env.action_space.n == 64
        assert env.observation_space.shape == (8, 8)

    def test_reset_returns_hidden_board(self, env: MinesweeperEnv) -> None:
        """Reset starts an idle session with every cell hidden."""
        obs, info = env.reset(seed=0)
        assert np.all(obs == -1)
        assert info["game_state"] == "IDLE"
        assert info["total_safe"] == 54

    def test_step_before_reset_raises(self, env: MinesweeperEnv) -> None:
        """Stepping without a session is an error."""
        with pytest.raises(RuntimeError):
            env.step(0)

    def test_reward_is_score_delta(
        self, env: MinesweeperEnv, walled_board: Board
    ) -> None:
        """Safe reveals reward the points they scored."""
        env.reset()
        env.session.board = walled_board
        _, reward, terminated, _, info = env.step(5)
        assert reward == 10.0
        assert terminated is False
        assert info["revealed"] == 10

    def test_repeat_action_penalized(
        self, env: MinesweeperEnv, walled_board: Board
    ) -> None:
        """Revealing a revealed cell costs a small penalty."""
        env.reset()
        env.session.board = walled_board
        env.step(1)
        _, reward, _, _, _ = env.step(1)
        assert reward == pytest.approx(-0.1)

    def test_mine_terminates_with_penalty(
        self, env: MinesweeperEnv, engine: MinesweeperEngine,
        walled_board: Board,
    ) -> None:
        """Hitting a mine ends the episode and records the loss."""
        env.reset()
        env.session.board = walled_board
        _, reward, terminated, _, info = env.step(2)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"
        assert len(engine.get_leaderboard("Easy")) == 1

    def test_win_reward_includes_bonus(
        self, env: MinesweeperEnv, corner_mine_board: Board
    ) -> None:
        """The winning step carries the mine bonus."""
        env.reset()
        env.session.board = corner_mine_board
        _, reward, terminated, _, _ = env.step(0)
        assert reward == 34.0
        assert terminated is True

    def test_action_mask_excludes_revealed(
        self, env: MinesweeperEnv, walled_board: Board
    ) -> None:
        """Revealed cells are masked out."""
        env.reset()
        env.session.board = walled_board
        env.step(1)
        mask = env.get_action_mask()
        assert not mask[1]
        assert mask.sum() == 24

    def test_ansi_render(
        self, env: MinesweeperEnv, walled_board: Board
    ) -> None:
        """ANSI rendering shows one row per line."""
        env.reset()
        env.session.board = walled_board
        env.step(1)
        lines = env.render().split("\n")
        assert len(lines) == 5
        assert lines[0] == ". 2 . . ."

    def test_seeded_reset_is_reproducible(self) -> None:
        """Equal seeds give equal boards."""
        first, second = MinesweeperEnv("Easy"), MinesweeperEnv("Easy")
        first.reset(seed=11)
        second.reset(seed=11)
        assert (
            first.session.board.mine_indices
            == second.session.board.mine_indices
        )

    def test_seeded_reset_leaves_engine_generator(
        self, env: MinesweeperEnv, engine: MinesweeperEngine
    ) -> None:
        """Seeding the environment does not touch the shared engine."""
        engine_rng = engine.rng
        env.reset(seed=3)
        assert engine.rng is engine_rng

        expected = np.random.default_rng(99)
        direct = engine.start_session("Easy")
        assert direct.board.mine_indices == generate_board(
            8, 10, expected
        ).mine_indices


# ============================================================================
# Agent Tests
# ============================================================================

class TestRandomAgent:
    """Test the baseline agent."""

    def test_picks_only_valid_actions(self) -> None:
        """Chosen cells are always allowed by the mask."""
        agent = RandomAgent(8, seed=0)
        mask = np.zeros(64, dtype=bool)
        mask[[3, 17, 40]] = True
        obs = np.full((8, 8), -1, dtype=np.int8)
        for _ in range(20):
            assert agent.select_action(obs, mask) in (3, 17, 40)

    def test_mask_from_observation(self) -> None:
        """Without a mask, hidden and flagged cells are candidates."""
        agent = RandomAgent(2, seed=0)
        obs = np.array([[0, 1], [-2, 2]], dtype=np.int8)
        assert agent.select_action(obs) == 2

    def test_position_helper(self) -> None:
        """Flat indices convert to (row, col)."""
        assert RandomAgent(8).action_to_position(19) == (2, 3)

    def test_plays_full_games(self, env: MinesweeperEnv) -> None:
        """Episodes driven by the agent always terminate."""
        agent = RandomAgent(8, seed=4)
        for _ in range(5):
            obs, _ = env.reset()
            terminated = False
            steps = 0
            while not terminated:
                action = agent.select_action(obs, env.get_action_mask())
                obs, _, terminated, _, _ = env.step(action)
                steps += 1
                assert steps <= 64
            assert env.session.is_terminal
