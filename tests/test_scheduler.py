from blockfall.board import PIECE_VALUES
from blockfall.config import GameConfig
from blockfall.game_state import GameSession
from blockfall.scheduler import SchedulerState
from blockfall.tetromino import ActivePiece, PieceKind, shape_of


def _o_piece(row: int, col: int) -> ActivePiece:
    return ActivePiece(PieceKind.O, shape_of(PieceKind.O), row=row, col=col)


def _force_game_over(session: GameSession) -> None:
    session.board.set_cell(1, 4, 1)
    session.active = _o_piece(-1, 4)
    session.soft_drop()
    assert session.game_over


def test_piece_waits_for_threshold_then_drops_one_row():
    session = GameSession(config=GameConfig(frames=5), seed=1)
    start = session.active.row
    for _ in range(5):
        session.tick()
    assert session.active.row == start
    assert session.tick_counter == 5

    session.tick()
    assert session.active.row == start + 1
    assert session.tick_counter == 0


def test_default_threshold_is_35_frames():
    session = GameSession(seed=2)
    start = session.active.row
    for _ in range(35):
        session.tick()
    assert session.active.row == start
    session.tick()
    assert session.active.row == start + 1


def test_blocked_drop_locks_in_place():
    session = GameSession(config=GameConfig(frames=0), seed=3)
    old = _o_piece(18, 0)
    session.active = old
    session.tick()

    assert session.active is not old
    value = PIECE_VALUES[PieceKind.O]
    for row, col in [(18, 0), (18, 1), (19, 0), (19, 1)]:
        assert session.board.get_cell(row, col) == value


def test_soft_drop_moves_exactly_one_row():
    session = GameSession(seed=5)
    session.active = _o_piece(3, 4)
    session.tick()
    session.soft_drop()
    assert session.active.row == 4
    assert session.tick_counter == 1


def test_soft_drop_locks_when_blocked():
    session = GameSession(seed=5)
    old = _o_piece(18, 8)
    session.active = old
    session.soft_drop()
    assert session.active is not old
    assert session.board.kind_at(19, 9) is PieceKind.O


def test_pause_toggle_is_idempotent_over_two_calls():
    session = GameSession(config=GameConfig(frames=0), seed=6)
    assert session.state is SchedulerState.RUNNING
    start = (session.active.row, session.active.col)

    session.toggle_pause()
    assert session.state is SchedulerState.PAUSED
    for _ in range(10):
        session.tick()
    session.soft_drop()
    session.move_left()
    assert (session.active.row, session.active.col) == start
    assert session.tick_counter == 0

    session.toggle_pause()
    assert session.state is SchedulerState.RUNNING
    assert not session.paused
    assert (session.active.row, session.active.col) == start


def test_game_over_suppresses_ticks_and_inputs():
    session = GameSession(config=GameConfig(frames=0), seed=7)
    _force_game_over(session)
    assert session.state is SchedulerState.GAME_OVER

    piece = session.active
    matrix = piece.matrix
    before = session.board.grid.copy()
    for action in (
        session.tick,
        session.move_left,
        session.move_right,
        session.rotate,
        session.soft_drop,
        session.toggle_pause,
    ):
        action()

    assert session.active is piece
    assert (piece.row, piece.col, piece.matrix) == (-1, 4, matrix)
    assert (session.board.grid == before).all()
    assert not session.paused
    assert session.state is SchedulerState.GAME_OVER


def test_reset_is_the_way_out_of_game_over():
    session = GameSession(seed=8)
    _force_game_over(session)
    session.reset()
    assert session.state is SchedulerState.RUNNING
    assert not session.board.grid.any()
    assert session.lines_cleared == 0
    assert session.tick_counter == 0
    assert session.active.row in (-1, -2)
