import random

from weighted_ttt import engine
from weighted_ttt.board import Board
from weighted_ttt.types import Move, RemainingValues, Side


def remaining(black=(), white=()) -> RemainingValues:
    return RemainingValues(black=tuple(black), white=tuple(white))


def test_capture_rule():
    assert engine.is_legal_placement(0, 1)
    assert engine.is_legal_placement(-1, 2)
    assert not engine.is_legal_placement(-2, 1)
    assert not engine.is_legal_placement(-2, 2)
    assert not engine.is_legal_placement(1, 3)
    assert engine.is_legal_placement(2, -3)


def test_generated_moves_respect_capture_rule():
    board = Board.from_rows([[-1, -2, 1], [0, 0, 0], [0, 0, 0]])
    moves = engine.generate_moves(board, Side.WHITE, remaining(white=(2, 1)))
    targets = {(mv.x, mv.y, mv.strength) for mv in moves}

    assert (0, 0, 2) in targets
    assert (0, 0, 1) not in targets
    assert all((1, 0, s) not in targets for s in (1, 2))
    assert all((2, 0, s) not in targets for s in (1, 2))
    assert len(moves) == 6 * 2 + 1


def test_moves_sorted_by_descending_strength():
    board = Board(3)
    moves = engine.generate_moves(board, Side.BLACK, remaining(black=(-1, -2, -3)), rng=random.Random(3))
    strengths = [abs(mv.strength) for mv in moves]
    assert strengths == sorted(strengths, reverse=True)
    assert len(moves) == 27


def test_shuffle_is_seeded_and_stays_within_groups():
    board = Board(3)
    values = remaining(black=(-1, -2, -3))
    first = engine.generate_moves(board, Side.BLACK, values, rng=random.Random(7))
    second = engine.generate_moves(board, Side.BLACK, values, rng=random.Random(7))
    plain = engine.generate_moves(board, Side.BLACK, values)

    assert first == second
    assert sorted(first, key=lambda mv: (mv.strength, mv.y, mv.x)) == sorted(
        plain, key=lambda mv: (mv.strength, mv.y, mv.x)
    )
    assert [mv.strength for mv in first] == [mv.strength for mv in plain]


def test_duplicates_collapse_to_first_unused_variant():
    board = Board(2)
    values = remaining(black=(-1, -1, -2))
    collapsed = engine.generate_moves(board, Side.BLACK, values)
    expanded = engine.generate_moves(board, Side.BLACK, values, collapse_duplicates=False)

    assert len(collapsed) == 4 * 2
    assert len(expanded) == 4 * 3
    assert {mv.variant_id for mv in collapsed if mv.strength == -1} == {0}

    used = {(Side.BLACK, 0)}
    after = engine.generate_moves(board, Side.BLACK, values, used)
    assert {mv.variant_id for mv in after if mv.strength == -1} == {1}


def test_used_variants_are_skipped():
    board = Board(2)
    values = remaining(white=(1, 2))
    used = {(Side.WHITE, 0), (Side.WHITE, 1)}
    assert engine.generate_moves(board, Side.WHITE, values, used) == []


def test_apply_undo_roundtrip():
    board = Board.from_rows([[0, -1], [0, 0]])
    before = board.rows()
    used = set()
    move = Move(x=1, y=0, strength=3, variant_id=2)

    undo = engine.apply_move_inplace(board, used, move)
    assert board.get(1, 0) == 3
    assert (Side.WHITE, 2) in used

    engine.undo_move_inplace(board, used, undo)
    assert board.rows() == before
    assert used == set()


def test_format_moves_lists_each_move():
    text = engine.format_moves([Move(0, 1, -2, 4)])
    assert text.splitlines()[0] == "1 moves :"
    assert "v_id = 4" in text
