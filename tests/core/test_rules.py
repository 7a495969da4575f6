"""Tests for the rules engine: per-piece legality and threatened squares."""

from capturechess.core.board import Board, apply_move, create_initial_board
from capturechess.core.enums import PieceKind, Player
from capturechess.core.piece import Piece
from capturechess.core.rules import (
    get_threatened_squares,
    is_valid_move,
    valid_destinations,
)
from capturechess.core.types import ALL_SQUARES, Square

P1, P2 = Player.ONE, Player.TWO


def _piece(kind: PieceKind, owner: Player) -> Piece:
    return Piece(kind, owner)


def _board(**placement: tuple[int, int]) -> Board:
    """Build a board from ``<char>_<tag>=(row, col)`` keyword arguments."""
    return Board.from_pieces(
        {sq: Piece.from_char(name[0]) for name, sq in placement.items()}
    )


class TestGeneralContract:
    def test_empty_source_is_illegal(self) -> None:
        assert not is_valid_move(create_initial_board(), 3, 3, 4, 3, P1)

    def test_opponent_piece_is_illegal(self) -> None:
        assert not is_valid_move(create_initial_board(), 6, 4, 5, 4, P1)

    def test_own_piece_capture_always_illegal(self) -> None:
        board = create_initial_board()
        for player in Player:
            own = [sq for sq, _ in board.pieces(player)]
            for from_sq in own:
                for to_sq in own:
                    assert not is_valid_move(board, *from_sq, *to_sq, player)

    def test_move_in_place_is_illegal(self) -> None:
        board = _board(Q_a=(4, 4))
        assert not is_valid_move(board, 4, 4, 4, 4, P1)

    def test_off_board_coordinates_rejected(self) -> None:
        board = create_initial_board()
        assert not is_valid_move(board, 1, 4, 8, 4, P1)
        assert not is_valid_move(board, -1, 0, 0, 0, P1)
        assert not is_valid_move(board, 0, 0, 0, -1, P1)
        assert not is_valid_move(board, 7, 8, 6, 7, P2)


class TestPawn:
    def test_single_step(self) -> None:
        board = create_initial_board()
        assert is_valid_move(board, 1, 4, 2, 4, P1)
        assert is_valid_move(board, 6, 4, 5, 4, P2)

    def test_double_step_from_home_row(self) -> None:
        board = create_initial_board()
        assert is_valid_move(board, 1, 4, 3, 4, P1)
        assert is_valid_move(board, 6, 4, 4, 4, P2)

    def test_triple_step_illegal(self) -> None:
        assert not is_valid_move(create_initial_board(), 1, 4, 4, 4, P1)

    def test_double_step_needs_clear_intermediate(self) -> None:
        board = create_initial_board().replace({(2, 4): _piece(PieceKind.KNIGHT, P2)})
        assert board.is_empty((3, 4))
        assert not is_valid_move(board, 1, 4, 3, 4, P1)

    def test_double_step_only_from_home_row(self) -> None:
        board = _board(P_a=(2, 4))
        assert not is_valid_move(board, 2, 4, 4, 4, P1)
        board = _board(p_a=(5, 4))
        assert not is_valid_move(board, 5, 4, 3, 4, P2)

    def test_backwards_illegal(self) -> None:
        board = _board(P_a=(3, 4), p_b=(5, 2))
        assert not is_valid_move(board, 3, 4, 2, 4, P1)
        assert not is_valid_move(board, 5, 2, 6, 2, P2)

    def test_straight_move_blocked_by_opponent(self) -> None:
        board = _board(P_a=(3, 4), p_b=(4, 4))
        assert not is_valid_move(board, 3, 4, 4, 4, P1)

    def test_diagonal_requires_capture(self) -> None:
        board = _board(P_a=(3, 4))
        assert not is_valid_move(board, 3, 4, 4, 5, P1)
        assert not is_valid_move(board, 3, 4, 4, 3, P1)

    def test_diagonal_capture(self) -> None:
        board = _board(P_a=(3, 4), p_b=(4, 5), p_c=(4, 3))
        assert is_valid_move(board, 3, 4, 4, 5, P1)
        assert is_valid_move(board, 3, 4, 4, 3, P1)
        assert is_valid_move(board, 4, 5, 3, 4, P2)

    def test_backward_diagonal_capture_illegal(self) -> None:
        board = _board(P_a=(3, 4), p_b=(2, 5))
        assert not is_valid_move(board, 3, 4, 2, 5, P1)

    def test_sideways_illegal(self) -> None:
        board = _board(P_a=(3, 4))
        assert not is_valid_move(board, 3, 4, 3, 5, P1)


class TestKnight:
    def test_l_shapes(self) -> None:
        board = _board(N_a=(4, 4))
        legal = set(valid_destinations(board, (4, 4)))
        assert legal == {
            (2, 3), (2, 5), (3, 2), (3, 6), (5, 2), (5, 6), (6, 3), (6, 5),
        }

    def test_jumps_from_initial_position(self) -> None:
        board = create_initial_board()
        assert is_valid_move(board, 0, 1, 2, 0, P1)
        assert is_valid_move(board, 0, 1, 2, 2, P1)
        assert not is_valid_move(board, 0, 1, 1, 3, P1)  # own pawn

    def test_ignores_surrounding_pieces(self) -> None:
        placement = {(4, 4): _piece(PieceKind.KNIGHT, P1)}
        for d_row in (-1, 0, 1):
            for d_col in (-1, 0, 1):
                if d_row or d_col:
                    placement[(4 + d_row, 4 + d_col)] = _piece(PieceKind.PAWN, P2)
                    placement[(6 + d_row, 5 + d_col)] = _piece(PieceKind.PAWN, P2)
        placement[(6, 5)] = _piece(PieceKind.ROOK, P2)
        board = Board.from_pieces(placement)
        assert is_valid_move(board, 4, 4, 6, 5, P1)

    def test_non_l_shape_illegal(self) -> None:
        board = _board(N_a=(4, 4))
        assert not is_valid_move(board, 4, 4, 6, 6, P1)
        assert not is_valid_move(board, 4, 4, 4, 6, P1)


class TestRook:
    def test_open_lines(self) -> None:
        board = _board(R_a=(3, 3))
        legal = set(valid_destinations(board, (3, 3)))
        assert len(legal) == 14
        assert all(sq.row == 3 or sq.col == 3 for sq in legal)

    def test_diagonal_illegal(self) -> None:
        assert not is_valid_move(_board(R_a=(3, 3)), 3, 3, 5, 5, P1)

    def test_blocked_by_opponent_piece(self) -> None:
        board = _board(R_a=(3, 3), p_b=(3, 5))
        assert is_valid_move(board, 3, 3, 3, 5, P1)  # capture
        assert not is_valid_move(board, 3, 3, 3, 6, P1)
        assert not is_valid_move(board, 3, 3, 3, 7, P1)

    def test_blocked_by_own_piece(self) -> None:
        board = _board(R_a=(3, 3), P_b=(5, 3), p_c=(7, 3))
        assert not is_valid_move(board, 3, 3, 6, 3, P1)
        assert not is_valid_move(board, 3, 3, 7, 3, P1)

    def test_initial_rook_boxed_in(self) -> None:
        assert valid_destinations(create_initial_board(), (0, 0)) == []


class TestBishop:
    def test_open_diagonals(self) -> None:
        board = _board(B_a=(3, 3))
        legal = set(valid_destinations(board, (3, 3)))
        assert len(legal) == 13
        assert all(abs(sq.row - 3) == abs(sq.col - 3) for sq in legal)

    def test_straight_illegal(self) -> None:
        assert not is_valid_move(_board(B_a=(3, 3)), 3, 3, 3, 6, P1)

    def test_blocked(self) -> None:
        board = _board(B_a=(2, 2), p_b=(4, 4))
        assert is_valid_move(board, 2, 2, 4, 4, P1)
        assert not is_valid_move(board, 2, 2, 5, 5, P1)

    def test_blocked_backwards(self) -> None:
        board = _board(b_a=(5, 5), P_b=(3, 3))
        assert not is_valid_move(board, 5, 5, 1, 1, P2)
        assert is_valid_move(board, 5, 5, 3, 3, P2)


class TestQueen:
    def test_combines_rook_and_bishop(self) -> None:
        board = _board(Q_a=(3, 3))
        assert len(valid_destinations(board, (3, 3))) == 27

    def test_knight_jump_illegal(self) -> None:
        assert not is_valid_move(_board(Q_a=(3, 3)), 3, 3, 5, 4, P1)

    def test_blocked_both_ways(self) -> None:
        board = _board(Q_a=(3, 3), P_b=(3, 5), p_c=(5, 5))
        assert not is_valid_move(board, 3, 3, 3, 6, P1)
        assert not is_valid_move(board, 3, 3, 6, 6, P1)
        assert is_valid_move(board, 3, 3, 5, 5, P1)


class TestKing:
    def test_one_square_any_direction(self) -> None:
        board = _board(K_a=(3, 3))
        legal = set(valid_destinations(board, (3, 3)))
        assert legal == {
            (2, 2), (2, 3), (2, 4), (3, 2), (3, 4), (4, 2), (4, 3), (4, 4),
        }

    def test_two_squares_illegal(self) -> None:
        assert not is_valid_move(_board(K_a=(3, 3)), 3, 3, 5, 3, P1)

    def test_cannot_move_along_threatened_rank(self) -> None:
        board = _board(r_a=(4, 4), K_b=(4, 0))
        assert not is_valid_move(board, 4, 0, 4, 1, P1)
        assert is_valid_move(board, 4, 0, 5, 0, P1)
        assert is_valid_move(board, 4, 0, 3, 0, P1)

    def test_may_capture_unguarded_attacker(self) -> None:
        board = _board(K_a=(3, 3), q_b=(4, 4))
        assert is_valid_move(board, 3, 3, 4, 4, P1)

    def test_cannot_step_onto_knight_target(self) -> None:
        board = _board(K_a=(3, 3), n_b=(6, 4))
        assert not is_valid_move(board, 3, 3, 4, 3, P1)
        assert is_valid_move(board, 3, 3, 4, 2, P1)

    def test_opponent_king_not_a_threat(self) -> None:
        board = _board(K_a=(3, 3), k_b=(5, 3))
        assert is_valid_move(board, 3, 3, 4, 3, P1)

    def test_pawn_only_threatens_capture_squares(self) -> None:
        board = _board(K_a=(3, 3), p_b=(5, 5))
        assert is_valid_move(board, 3, 3, 4, 4, P1)

    def test_player_two_king(self) -> None:
        board = _board(k_a=(7, 4), R_b=(6, 0))
        assert not is_valid_move(board, 7, 4, 6, 4, P2)
        assert is_valid_move(board, 7, 4, 7, 3, P2)


class TestThreatenedSquares:
    def test_initial_player_two(self) -> None:
        threatened = get_threatened_squares(create_initial_board(), P2)
        assert threatened == {Square(r, c) for r in (4, 5) for c in range(8)}

    def test_initial_player_one(self) -> None:
        threatened = get_threatened_squares(create_initial_board(), P1)
        assert threatened == {Square(r, c) for r in (2, 3) for c in range(8)}

    def test_kings_are_not_attackers(self) -> None:
        board = _board(k_a=(4, 4))
        assert get_threatened_squares(board, P2) == set()

    def test_rook_line_includes_capture_square(self) -> None:
        board = _board(r_a=(4, 4), K_b=(4, 0))
        threatened = get_threatened_squares(board, P2)
        assert {(4, 0), (4, 1), (4, 2), (4, 3)} <= threatened
        assert (5, 0) not in threatened

    def test_does_not_mutate_board(self) -> None:
        board = create_initial_board()
        get_threatened_squares(board, P1)
        assert board == Board.initial()


class TestValidDestinations:
    def test_empty_square(self) -> None:
        assert valid_destinations(create_initial_board(), (4, 4)) == []

    def test_row_major_order(self) -> None:
        board = create_initial_board()
        assert valid_destinations(board, (0, 1)) == [Square(2, 0), Square(2, 2)]

    def test_matches_is_valid_move(self) -> None:
        board = create_initial_board()
        expected = [sq for sq in ALL_SQUARES if is_valid_move(board, 6, 3, *sq, P2)]
        assert valid_destinations(board, (6, 3)) == expected


class TestScenarios:
    def test_double_step_then_illegal_follow_ups(self) -> None:
        board = create_initial_board()
        assert is_valid_move(board, 1, 4, 3, 4, P1)

        after = apply_move(board, (1, 4), (3, 4))
        assert after[(3, 4)] == _piece(PieceKind.PAWN, P1)
        assert after.is_empty((1, 4))

        assert not is_valid_move(after, 3, 4, 3, 4, P1)
        assert not is_valid_move(after, 3, 4, 3, 5, P1)

    def test_king_versus_lone_rook(self) -> None:
        board = Board.from_pieces(
            {
                (4, 4): _piece(PieceKind.ROOK, P2),
                (4, 0): _piece(PieceKind.KING, P1),
            }
        )
        assert not is_valid_move(board, 4, 0, 4, 1, P1)
        assert is_valid_move(board, 4, 0, 5, 0, P1)
