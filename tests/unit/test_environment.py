"""
Unit tests for the Gymnasium environment.
"""
import numpy as np
from minefield import BoardConfig, GameStatus, MinesweeperEnv


class TestEnvironment:
    """Test the RL interface over a game session."""

    def test_reset_returns_hidden_board(self) -> None:
        """Reset yields an all-hidden observation matching the space."""
        env = MinesweeperEnv(BoardConfig(5, 6, 4))
        obs, info = env.reset(seed=1)

        assert obs.shape == (5, 6)
        assert obs.dtype == np.int8
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "READY"
        assert info["total_safe"] == 26

    def test_reset_builds_new_session(self) -> None:
        """Every episode gets a fresh session."""
        env = MinesweeperEnv()
        env.reset()
        first = env.session
        env.reset()
        assert env.session is not first
        assert env.session.status == GameStatus.READY

    def test_first_step_is_safe(self) -> None:
        """The first reveal is never penalised as a mine."""
        env = MinesweeperEnv(BoardConfig(4, 4, 15))
        for seed in range(10):
            env.reset(seed=seed)
            _, reward, terminated, _, info = env.step(5)
            assert reward == 10.0
            assert terminated is True
            assert info["game_state"] == "WON"

    def test_repeat_step_is_invalid(self) -> None:
        """Stepping on an open cell costs a small penalty."""
        env = MinesweeperEnv()
        env.reset(seed=3)
        env.step(40)
        if not env.session.is_over:
            _, reward, _, _, _ = env.step(40)
            assert reward == -0.1

    def test_action_mask_tracks_hidden_cells(self) -> None:
        """Opened cells drop out of the mask."""
        env = MinesweeperEnv()
        env.reset(seed=7)
        assert env.get_action_mask().sum() == 81
        env.step(0)
        mask = env.get_action_mask()
        assert not mask[0]
        assert mask.sum() == 81 - env.session.board.safe_revealed

    def test_ansi_render(self) -> None:
        """ANSI rendering draws one line per row."""
        env = MinesweeperEnv(BoardConfig(4, 5, 2), render_mode="ansi")
        env.reset(seed=0)
        text = env.render()
        assert text.splitlines() == [". . . . . "] * 4
