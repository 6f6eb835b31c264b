"""Tests for the FEN stub, UCI move codes and snapshots."""

import pytest

from chessarbiter.core.enums import CastlingRights, Color, PieceType
from chessarbiter.core.errors import (
    InvalidSquareError,
    PromotionError,
    UnsupportedNotationError,
)
from chessarbiter.core.move import Move
from chessarbiter.core.notation import (
    STANDARD_START_FEN,
    UNSUPPORTED_FEN,
    move_to_dict,
    parse_move,
    parse_promotion,
    position_from_fen,
    position_to_dict,
    position_to_fen,
    promotion_code,
    status_to_dict,
)
from chessarbiter.core.position import Position
from chessarbiter.core.status import GameStatus
from chessarbiter.core.types import E2, E4, parse_square


class TestFenImport:
    def test_startpos_token(self) -> None:
        assert position_from_fen("startpos") == Position.initial()

    def test_standard_fen(self) -> None:
        assert position_from_fen(STANDARD_START_FEN) == Position.initial()

    def test_surrounding_whitespace_ignored(self) -> None:
        assert position_from_fen("  startpos\n") == Position.initial()
        assert position_from_fen(f" {STANDARD_START_FEN} ") == Position.initial()

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "STARTPOS",
            "8/8/8/8/8/8/8/8 w - - 0 1",
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 2",
        ],
    )
    def test_anything_else_unsupported(self, fen: str) -> None:
        with pytest.raises(UnsupportedNotationError):
            position_from_fen(fen)

    def test_unsupported_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            position_from_fen("not a fen")


class TestFenExport:
    def test_initial_position(self) -> None:
        assert position_to_fen(Position.initial()) == STANDARD_START_FEN

    def test_round_trip(self) -> None:
        assert position_to_fen(position_from_fen(STANDARD_START_FEN)) == STANDARD_START_FEN

    def test_other_positions_give_sentinel(self) -> None:
        pos = Position.initial().apply_unchecked(Move(E2, E4))
        assert position_to_fen(pos) == UNSUPPORTED_FEN
        assert position_to_fen(pos) == "unsupported-fen-serialization"

    def test_sentinel_is_not_importable(self) -> None:
        with pytest.raises(UnsupportedNotationError):
            position_from_fen(UNSUPPORTED_FEN)


class TestPromotionCodes:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("q", PieceType.QUEEN),
            ("R", PieceType.ROOK),
            ("b", PieceType.BISHOP),
            ("N", PieceType.KNIGHT),
        ],
    )
    def test_known_codes(self, code: str, expected: PieceType) -> None:
        assert parse_promotion(code) == expected

    def test_absent(self) -> None:
        assert parse_promotion(None) is None

    @pytest.mark.parametrize("code", ["", "k", "p", "x", "qq"])
    def test_unknown_codes(self, code: str) -> None:
        with pytest.raises(PromotionError):
            parse_promotion(code)

    def test_promotion_code(self) -> None:
        assert promotion_code(PieceType.KNIGHT) == "n"
        with pytest.raises(PromotionError):
            promotion_code(PieceType.KING)


class TestParseMove:
    def test_plain(self) -> None:
        assert parse_move("e2e4") == Move(E2, E4)

    def test_promotion(self) -> None:
        move = parse_move("e7e8q")
        assert move.promotion == PieceType.QUEEN
        assert str(move) == "e7e8q"

    @pytest.mark.parametrize("text", ["e2", "e2e4e5", ""])
    def test_bad_length(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move(text)

    def test_bad_square(self) -> None:
        with pytest.raises(InvalidSquareError):
            parse_move("e9e4")

    def test_bad_promotion_letter(self) -> None:
        with pytest.raises(PromotionError):
            parse_move("e7e8k")


class TestSnapshot:
    def test_initial_position(self) -> None:
        data = position_to_dict(Position.initial())
        assert len(data["board"]) == 32
        assert data["board"]["e1"] == {"color": "white", "kind": "king"}
        assert data["board"]["d8"] == {"color": "black", "kind": "queen"}
        assert data["activeColor"] == "white"
        assert data["status"] == {"type": "in_progress"}
        assert data["halfmoveClock"] == 0
        assert data["fullmoveNumber"] == 1
        assert data["castlingRights"] == {
            "whiteKingSide": True,
            "whiteQueenSide": True,
            "blackKingSide": True,
            "blackQueenSide": True,
        }
        assert data["enPassantTarget"] is None

    def test_after_double_push(self) -> None:
        pos = Position.initial().apply_unchecked(Move(E2, E4))
        data = position_to_dict(pos)
        assert "e2" not in data["board"]
        assert data["board"]["e4"] == {"color": "white", "kind": "pawn"}
        assert data["activeColor"] == "black"
        assert data["enPassantTarget"] == "e3"

    def test_partial_castling_rights(self, make_position) -> None:
        pos = make_position(
            {"e1": "K", "e8": "k"},
            castling=CastlingRights.WHITE_KINGSIDE | CastlingRights.BLACK_QUEENSIDE,
        )
        assert position_to_dict(pos)["castlingRights"] == {
            "whiteKingSide": True,
            "whiteQueenSide": False,
            "blackKingSide": False,
            "blackQueenSide": True,
        }

    def test_status_variants(self) -> None:
        assert status_to_dict(GameStatus.checkmate(Color.BLACK)) == {
            "type": "checkmate",
            "winner": "black",
        }
        assert status_to_dict(GameStatus.stalemate(Color.WHITE)) == {
            "type": "stalemate",
            "sideToMove": "white",
        }

    def test_move(self) -> None:
        assert move_to_dict(Move(E2, E4)) == {"from": "e2", "to": "e4", "promotion": None}
        promo = Move(parse_square("a7"), parse_square("a8"), PieceType.KNIGHT)
        assert move_to_dict(promo)["promotion"] == "knight"
