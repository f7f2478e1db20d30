import random

import pytest

from weighted_ttt import search
from weighted_ttt.board import Board
from weighted_ttt.errors import NoLegalMoveError
from weighted_ttt.game import Game
from weighted_ttt.search import SearchContext
from weighted_ttt.types import Outcome, RemainingValues, Side


def make_ctx(rows, black=(), white=(), max_depth=4, **kwargs) -> SearchContext:
    return SearchContext(
        board=Board.from_rows(rows),
        remaining=RemainingValues(black=tuple(black), white=tuple(white)),
        max_depth=max_depth,
        **kwargs,
    )


def test_board_untouched_after_search():
    rows = [[-1, 2, 0], [0, 1, 0], [0, -2, 0]]
    ctx = make_ctx(rows, black=(-1, -2, -3, -3), white=(1, 2, 3), max_depth=4, rng=random.Random(1))
    search.best_move(ctx, Side.BLACK)
    assert ctx.board.rows() == rows
    assert ctx.used == set()


def test_live_game_board_untouched():
    game = Game()
    game_move = search.random_move(game.board, game.remaining_values(), Side.WHITE, random.Random(2))
    assert game.play_move(game_move)
    before = game.board.rows()
    ctx = SearchContext.from_game(game, max_depth=3, rng=random.Random(5))
    search.best_move(ctx, Side.BLACK)
    assert game.board.rows() == before
    assert game.board.get(game_move.x, game_move.y) == game_move.strength


def test_takes_immediate_win():
    # Black owns two of the top row; (2, 0) completes it.
    rows = [[-1, -1, 0], [1, 2, 0], [0, 0, 0]]
    ctx = make_ctx(rows, black=(-1, -2), white=(1, 3), max_depth=4)
    score, move = search.best_move(ctx, Side.BLACK)
    assert (move.x, move.y) == (2, 0)
    assert score == ctx.horizon - 1


def test_blocks_white_threat():
    # White threatens the middle row at (2, 1); Black has no win of its own in one.
    rows = [[0, 0, -1], [1, 1, 0], [0, -1, 0]]
    ctx = make_ctx(rows, black=(-2, -3), white=(1, 2), max_depth=3)
    _, move = search.best_move(ctx, Side.BLACK)
    assert move.y == 1


def test_prefers_faster_win():
    ctx = make_ctx([[0, 0, 0], [0, 0, 0], [0, 0, 0]], max_depth=4)
    fast = search.static_score(ctx, Outcome.BLACK, False, 1)
    slow = search.static_score(ctx, Outcome.BLACK, False, 3)
    quick_loss = search.static_score(ctx, Outcome.WHITE, True, 2)
    late_loss = search.static_score(ctx, Outcome.WHITE, True, 4)
    cutoff = search.static_score(ctx, None, True, 4)

    assert fast > slow > cutoff
    assert quick_loss < late_loss
    assert abs(cutoff) < search.static_score(ctx, Outcome.BLACK, True, 4)


def test_white_side_minimizes():
    rows = [[1, 1, 0], [-1, -2, 0], [0, 0, 0]]
    ctx = make_ctx(rows, black=(-1, -3), white=(1, 2), max_depth=3)
    score, move = search.best_move(ctx, Side.WHITE)
    assert (move.x, move.y) == (2, 0)
    assert score == -(ctx.horizon - 1)


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_alpha_beta_matches_plain_minimax(seed):
    rows = [[-1, 0, 2], [0, 1, 0], [0, 0, -2]]
    black = (-1, -2, -3)
    white = (1, 3)
    pruned = make_ctx(rows, black, white, max_depth=4, rng=random.Random(seed))
    plain = make_ctx(rows, black, white, max_depth=4, rng=random.Random(seed), prune=False)

    score_pruned, move_pruned = search.best_move(pruned, Side.BLACK)
    score_plain, move_plain = search.best_move(plain, Side.BLACK)

    assert move_pruned == move_plain
    assert score_pruned == score_plain
    assert pruned.stats.nodes <= plain.stats.nodes
    assert plain.stats.pruned == 0


def test_empty_board_opening_lands_on_empty_cell():
    game = Game()
    ctx = SearchContext.from_game(game, max_depth=5, rng=random.Random(0))
    _, move = search.best_move(ctx, Side.BLACK)
    assert game.board.get(move.x, move.y) == 0
    assert move.strength < 0
    assert ctx.stats.nodes > 0
    assert ctx.stats.max_depth == 5


def test_stalemate_leaf_scores_as_draw():
    # White has nothing left and cannot answer; the position is neither won nor full.
    rows = [[-1, 1, 0], [0, 0, 0], [0, 0, 0]]
    ctx = make_ctx(rows, black=(-1,), white=(), max_depth=4)
    assert search.minimax(ctx, float("-inf"), float("inf"), False, 1) == search.STALEMATE_SCORE


def test_no_legal_move_raises():
    ctx = make_ctx([[0, 0], [0, 0]], black=(), white=(1,), max_depth=2)
    with pytest.raises(NoLegalMoveError):
        search.best_move(ctx, Side.BLACK)


def test_random_move_on_full_board_raises():
    board = Board.from_rows([[-1, 1], [1, -1]])
    with pytest.raises(NoLegalMoveError):
        search.random_move(board, RemainingValues(black=(-2,), white=()), Side.BLACK, random.Random(0))


def test_random_move_is_seeded():
    game = Game()
    first = search.random_move(game.board, game.remaining_values(), Side.BLACK, random.Random(11))
    second = search.random_move(game.board, game.remaining_values(), Side.BLACK, random.Random(11))
    assert first == second
    assert first.strength in game.remaining_values().black


def test_max_depth_must_be_positive():
    with pytest.raises(ValueError):
        make_ctx([[0]], max_depth=0)
