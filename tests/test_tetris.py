import pytest

from gbemu.tetris import (
    Color,
    GameBoard,
    GameState,
    TetrisGame,
    Tetromino,
    TetrominoType,
)


def filled_count(board):
    return sum(cell is not Color.BLACK for row in board.grid for cell in row)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_restore_shape(kind):
    piece = Tetromino(kind)
    original = [row[:] for row in piece.shape]
    for _ in range(4):
        piece.rotate()
    assert piece.shape == original
    assert piece.rotation == 0


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_every_piece_has_four_cells(kind):
    piece = Tetromino(kind)
    assert sum(cell for row in piece.shape for cell in row) == 4
    piece.rotate()
    assert sum(cell for row in piece.shape for cell in row) == 4


def test_piece_colour_and_start():
    piece = Tetromino(TetrominoType.I)
    assert piece.color is Color.CYAN
    assert (piece.x, piece.y) == (3, 0)


def test_board_bounds():
    board = GameBoard(10, 20)
    piece = Tetromino(TetrominoType.O)
    assert board.is_valid_position(piece, 0, 0)
    assert not board.is_valid_position(piece, -4, 0)
    assert not board.is_valid_position(piece, 0, 19)


def test_place_piece_and_collision():
    board = GameBoard(10, 20)
    piece = Tetromino(TetrominoType.O)
    board.place_piece(piece)
    assert filled_count(board) == 4
    assert not board.is_valid_position(Tetromino(TetrominoType.O), 0, 0)


def test_clear_lines():
    board = GameBoard(10, 20)
    board.grid[19] = [Color.GRAY] * 10
    board.grid[18][0] = Color.RED
    assert board.clear_lines() == 1
    assert len(board.grid) == 20
    assert board.grid[19][0] is Color.RED
    assert filled_count(board) == 1


def test_is_game_over():
    board = GameBoard(10, 20)
    assert not board.is_game_over()
    board.grid[0][5] = Color.GRAY
    assert board.is_game_over()


def test_new_game():
    game = TetrisGame()
    assert game.state is GameState.PLAYING
    assert game.current_piece.tetromino_type is TetrominoType.L
    assert len(game.piece_bag) == 6
    assert set(game.piece_bag) | {TetrominoType.L} == set(TetrominoType)


def test_ghost_piece_rests_on_floor():
    game = TetrisGame()
    ghost = game.ghost_piece
    assert ghost.y >= game.current_piece.y
    assert not game.board.is_valid_position(ghost, 0, 1)
    assert game.board.is_valid_position(ghost, 0, 0)


def test_move_stops_at_wall():
    game = TetrisGame()
    moves = 0
    while game.move_piece(-1, 0):
        moves += 1
    assert moves > 0
    assert not game.board.is_valid_position(game.current_piece, -1, 0)


def test_hard_drop_locks_piece():
    game = TetrisGame()
    game.hard_drop()
    assert game.stats.total_pieces == 1
    assert filled_count(game.board) == 4
    assert game.current_piece is not None
    assert game.current_piece.y == 0


def test_line_clear_scores():
    game = TetrisGame()
    game.current_piece = Tetromino(TetrominoType.I)
    game.board.grid[19] = [
        Color.BLACK if 3 <= x <= 6 else Color.GRAY for x in range(10)
    ]
    game.hard_drop()
    assert game.stats.lines_cleared == 1
    assert game.stats.score == 100
    assert game.stats.level == 1
    assert filled_count(game.board) == 0


def test_game_over_after_drop():
    game = TetrisGame()
    game.board.grid[0][0] = Color.GRAY
    game.hard_drop()
    assert game.state is GameState.GAME_OVER
    game.toggle_pause()
    assert game.state is GameState.GAME_OVER


def test_update_applies_gravity():
    game = TetrisGame()
    y = game.current_piece.y
    game.drop_timer -= 10
    game.update()
    assert game.current_piece.y == y + 1


def test_pause_stops_gravity():
    game = TetrisGame()
    game.toggle_pause()
    assert game.state is GameState.PAUSED
    y = game.current_piece.y
    game.drop_timer -= 10
    game.update()
    assert game.current_piece.y == y
    game.toggle_pause()
    assert game.state is GameState.PLAYING


def test_rotate_piece_changes_rotation():
    game = TetrisGame()
    game.move_piece(0, 2)
    assert game.rotate_piece()
    assert game.current_piece.rotation == 1


def test_reset():
    game = TetrisGame()
    game.hard_drop()
    game.reset()
    assert game.stats.total_pieces == 0
    assert filled_count(game.board) == 0
    assert game.state is GameState.PLAYING
    assert len(game.piece_bag) == 6