"""Tests for Rules: check, checkmate, stalemate and status evaluation."""

from chessarbiter.core.enums import Color, StatusKind
from chessarbiter.core.position import Position
from chessarbiter.core.rules import Rules, evaluate_status
from chessarbiter.core.status import GameStatus

_FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert not Rules.is_in_check(Position.initial())

    def test_fools_mate_in_check(self, make_position) -> None:
        pos = make_position(_FOOLS_MATE)
        assert Rules.is_in_check(pos)


class TestCheckmate:
    def test_fools_mate(self, make_position) -> None:
        pos = make_position(_FOOLS_MATE)
        assert Rules.is_checkmate(pos)
        assert evaluate_status(pos) == GameStatus.checkmate(Color.BLACK)

    def test_back_rank_mate(self, make_position) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        pos = make_position("R2k4/8/3K4/8/8/8/8/8", side=Color.BLACK)
        assert Rules.is_checkmate(pos)
        status = evaluate_status(pos)
        assert status.kind == StatusKind.CHECKMATE
        assert status.winner == Color.WHITE

    def test_not_checkmate_when_can_escape(self, make_position) -> None:
        pos = make_position("4k3/8/8/8/8/8/8/r3K3")
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)
        assert evaluate_status(pos) == GameStatus.in_progress()

    def test_not_checkmate_when_check_can_be_blocked(self, make_position) -> None:
        pos = make_position({"h1": "K", "g2": "P", "h2": "P", "f3": "B", "a1": "r"})
        assert Rules.is_in_check(pos)
        assert not Rules.is_checkmate(pos)


class TestStalemate:
    def test_king_trapped(self, make_position) -> None:
        # Black king on h8, white K on f6, white Q on g6
        pos = make_position("7k/8/5KQ1/8/8/8/8/8", side=Color.BLACK)
        assert Rules.is_stalemate(pos)
        assert not Rules.is_checkmate(pos)
        assert evaluate_status(pos) == GameStatus.stalemate(Color.BLACK)

    def test_not_stalemate_when_has_moves(self, make_position) -> None:
        pos = make_position("7k/8/5K2/8/8/8/8/8", side=Color.BLACK)
        assert not Rules.is_stalemate(pos)

    def test_stalemate_status_has_no_winner(self, make_position) -> None:
        pos = make_position("7k/8/5KQ1/8/8/8/8/8", side=Color.BLACK)
        status = evaluate_status(pos)
        assert status.is_over
        assert status.winner is None


class TestEvaluateStatus:
    def test_in_progress_at_start(self) -> None:
        assert evaluate_status(Position.initial()) == GameStatus.in_progress()

    def test_halfmove_clock_never_ends_game(self, make_position) -> None:
        pos = make_position("4k3/8/8/8/8/8/8/4K3", halfmove_clock=150)
        assert evaluate_status(pos) == GameStatus.in_progress()

    def test_bare_kings_still_in_progress(self, make_position) -> None:
        pos = make_position({"e1": "K", "e8": "k"})
        assert not evaluate_status(pos).is_over

    def test_status_str(self) -> None:
        assert str(GameStatus.checkmate(Color.WHITE)) == "checkmate (white wins)"
        assert str(GameStatus.stalemate(Color.BLACK)) == "stalemate (black to move)"
        assert str(GameStatus.in_progress()) == "in progress"
