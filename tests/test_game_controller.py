import pytest

from weighted_ttt.agents import MinimaxAgent, RandomAgent
from weighted_ttt.config import GameConfig
from weighted_ttt.errors import IllegalMoveError
from weighted_ttt.game_controller import GameController
from weighted_ttt.types import Outcome, Side


def test_human_then_ai_flow():
    controller = GameController(black_agent=MinimaxAgent(max_depth=3, seed=1), white_agent=None)
    assert controller.turn is Side.WHITE
    assert controller.is_human_turn()

    move = controller.apply_human_move(1, 1, 3)
    assert move.strength == 3
    assert controller.turn is Side.BLACK

    ai_move = controller.step_ai()
    assert ai_move.strength < 0
    assert controller.turn is Side.WHITE
    assert [side for side, _ in controller.history] == [Side.WHITE, Side.BLACK]
    assert controller.statistics.current.decisions


def test_wrong_turn_is_rejected_without_changes():
    controller = GameController(black_agent=None, white_agent=None)
    with pytest.raises(IllegalMoveError):
        controller.apply_human_move(0, 0, 1, side=Side.BLACK)
    assert controller.board.is_empty()
    assert controller.turn is Side.WHITE


def test_occupied_cell_rules():
    controller = GameController(black_agent=None, white_agent=None)
    controller.apply_human_move(0, 0, 1)
    controller.apply_human_move(1, 1, 2)

    # White may not land on its own piece nor on an equal opponent.
    with pytest.raises(IllegalMoveError):
        controller.apply_human_move(0, 0, 3)
    with pytest.raises(IllegalMoveError):
        controller.apply_human_move(1, 1, 2)
    assert controller.turn is Side.WHITE

    controller.apply_human_move(1, 1, 3)
    assert controller.board.get(1, 1) == 3
    assert controller.game.black_pieces[3].killed


def test_missing_piece_is_rejected():
    controller = GameController(black_agent=None, white_agent=None, config=GameConfig(strengths=(1,)))
    with pytest.raises(IllegalMoveError):
        controller.apply_human_move(0, 0, 2)


def test_random_opening_when_board_empty():
    config = GameConfig(first=Side.BLACK, seed=3)
    agent = MinimaxAgent(max_depth=3, seed=1)
    controller = GameController(black_agent=agent, white_agent=None, config=config)

    controller.step_ai()
    assert agent.last_stats is None
    assert not controller.statistics.current.decisions
    assert controller.game.has_pieces_on_board()


def test_full_game_between_agents_scores_winner():
    config = GameConfig(max_depth=2, seed=5)
    controller = GameController(
        black_agent=MinimaxAgent(max_depth=2, seed=1), white_agent=RandomAgent(seed=2), config=config
    )
    while not controller.is_over():
        controller.step_ai()
    outcome = controller.winner()
    assert outcome is not None
    if outcome is Outcome.DRAW:
        assert controller.score == {Side.BLACK: 0, Side.WHITE: 0}
    else:
        assert controller.score[outcome.side] == 1

    with pytest.raises(IllegalMoveError):
        controller.step_ai()

    finished = controller.finish_game()
    assert controller.statistics.games == [finished]
    controller.new_game()
    assert controller.board.is_empty()
    assert controller.history == []


def test_side_without_pieces_ends_in_draw():
    controller = GameController(black_agent=None, white_agent=None, config=GameConfig(strengths=(3,)))
    controller.apply_human_move(0, 0, 3)
    controller.apply_human_move(1, 1, 3)
    assert controller.board.winner() is None
    assert controller.winner() is Outcome.DRAW
