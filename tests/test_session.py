import random

import pytest

from snake_arcade import constants
from snake_arcade.board import Board
from snake_arcade.collision import CollisionKind
from snake_arcade.food import Food
from snake_arcade.session import GameSession, GameState, StepResult
from snake_arcade.snake import Snake
from snake_arcade.utils import Cell, Direction


def place(session, body, direction=Direction.RIGHT, food=Cell(0, 0)):
    board = session.board
    board.snake = Snake(list(body))
    board.direction = direction
    board.pending_direction = direction
    board.food = Food(food) if food is not None else None


def test_starts_in_menu(session):
    assert session.state is GameState.MENU
    assert session.phase is GameState.MENU
    assert not session.paused
    assert not session.ticking


def test_high_score_loaded_from_store(board, sound, store):
    store.value = 80

    session = GameSession(board=board, sound=sound, store=store)

    assert session.high_score == 80


def test_select_difficulty_starts_game(session):
    assert session.select_difficulty(1) is True

    assert session.state is GameState.RUNNING
    assert session.score == 0
    assert session.level == 1
    assert session.interval == constants.DIFFICULTY_DELAYS[1]
    assert len(session.board.snake) == constants.START_LENGTH
    assert session.board.direction is Direction.RIGHT


@pytest.mark.parametrize("difficulty, delay", [(1, 180), (2, 140), (3, 100)])
def test_difficulty_sets_base_delay(session, difficulty, delay):
    session.select_difficulty(difficulty)

    assert session.base_delay == delay
    assert session.interval == delay


def test_unknown_difficulty_is_ignored(session):
    assert session.select_difficulty(7) is False
    assert session.state is GameState.MENU


def test_menu_ignores_other_inputs(session):
    assert session.toggle_pause() is False
    assert session.restart() is False
    assert session.change_direction(Direction.UP) is False
    assert session.step() == StepResult()
    assert session.state is GameState.MENU


def test_running_ignores_difficulty_and_restart(running_session):
    assert running_session.select_difficulty(3) is False
    assert running_session.restart() is False
    assert running_session.state is GameState.RUNNING
    assert running_session.base_delay == 140


def test_pause_toggles_and_keeps_game_data(running_session):
    running_session.score = 30
    body = running_session.board.snake.cells()

    assert running_session.toggle_pause() is True
    assert running_session.phase is GameState.PAUSED
    assert running_session.state is GameState.RUNNING
    assert running_session.score == 30
    assert running_session.board.snake.cells() == body

    assert running_session.toggle_pause() is True
    assert running_session.phase is GameState.RUNNING


def test_paused_ignores_moves_and_ticks(running_session):
    running_session.toggle_pause()
    body = running_session.board.snake.cells()

    assert running_session.change_direction(Direction.UP) is False
    assert running_session.select_difficulty(1) is False
    assert running_session.restart() is False
    assert running_session.step() == StepResult()
    assert running_session.board.snake.cells() == body
    assert running_session.board.pending_direction is Direction.RIGHT


def test_reverse_direction_ignored(running_session):
    assert running_session.change_direction(Direction.LEFT) is False
    assert running_session.board.direction is Direction.RIGHT


def test_tick_without_food_moves_right(running_session):
    place(running_session, [Cell(12, 12), Cell(11, 12), Cell(10, 12)])

    result = running_session.step()

    assert result == StepResult()
    assert running_session.board.snake.body == [Cell(13, 12), Cell(12, 12), Cell(11, 12)]
    assert running_session.score == 0


def test_eating_food_grows_and_scores(running_session, sound):
    place(running_session, [Cell(9, 12), Cell(8, 12), Cell(7, 12)], food=Cell(10, 12))

    result = running_session.step()

    assert result.ate is True
    assert len(running_session.board.snake) == 4
    assert running_session.score == 10
    assert sound.played == ["eat"]
    new_food = running_session.board.food_position
    assert new_food is not None
    assert new_food not in running_session.board.snake


def test_length_changes_only_when_eating(running_session):
    running_session.board.food = Food(Cell(0, 0))
    for _ in range(5):
        before = len(running_session.board.snake)
        result = running_session.step()
        assert len(running_session.board.snake) == before + (1 if result.ate else 0)


def test_score_fifty_reaches_level_two(running_session):
    running_session.score = 40
    place(running_session, [Cell(9, 12), Cell(8, 12), Cell(7, 12)], food=Cell(10, 12))

    result = running_session.step()

    assert running_session.score == 50
    assert running_session.level == 2
    assert result.new_interval == max(constants.MIN_DELAY, 140 - 10)
    assert running_session.interval == 130


def test_level_tracks_score_after_every_update(running_session):
    for _ in range(10):
        head = running_session.board.snake.head
        running_session.board.food = Food(head.step(running_session.board.direction))
        running_session.step()
        assert running_session.level == running_session.score // 50 + 1
        assert running_session.interval >= constants.MIN_DELAY


def test_wall_collision_ends_game(running_session, sound):
    place(running_session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)

    result = running_session.step()

    assert result.collision is CollisionKind.WALL
    assert result.game_over
    assert running_session.board.snake.head == Cell(-1, 5)
    assert running_session.state is GameState.GAME_OVER
    assert not running_session.ticking
    assert sound.played == ["game_over"]


def test_self_collision_ends_game(running_session):
    body = [Cell(5, 5), Cell(6, 5), Cell(6, 6), Cell(5, 6), Cell(4, 6)]
    place(running_session, body, direction=Direction.DOWN)

    result = running_session.step()

    assert result.collision is CollisionKind.SELF
    assert running_session.state is GameState.GAME_OVER


def test_moving_into_vacated_tail_is_safe(running_session):
    body = [Cell(5, 5), Cell(6, 5), Cell(6, 6), Cell(5, 6)]
    place(running_session, body, direction=Direction.DOWN)

    result = running_session.step()

    assert result.collision is None
    assert running_session.state is GameState.RUNNING


def test_no_ticks_after_game_over(running_session):
    place(running_session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)
    running_session.step()
    body = running_session.board.snake.cells()

    assert running_session.step() == StepResult()
    assert running_session.board.snake.cells() == body


def test_new_high_score_is_persisted(board, sound, store):
    store.value = 80
    session = GameSession(board=board, sound=sound, store=store)
    session.select_difficulty(2)
    session.score = 120
    place(session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)

    session.step()

    assert session.high_score == 120
    assert store.saved == [120]
    assert session.new_high_score is True
    assert sound.played == ["game_over", "high_score"]
    assert session.snapshot().new_high_score is True


def test_lower_score_keeps_high_score(board, sound, store):
    store.value = 80
    session = GameSession(board=board, sound=sound, store=store)
    session.select_difficulty(2)
    session.score = 30
    place(session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)

    session.step()

    assert session.high_score == 80
    assert store.saved == []
    assert session.new_high_score is False


def test_equal_score_is_not_a_new_high_score(board, sound, store):
    store.value = 80
    session = GameSession(board=board, sound=sound, store=store)
    session.select_difficulty(2)
    session.score = 80
    place(session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)

    session.step()

    assert session.new_high_score is False
    assert store.saved == []


def test_game_over_ignores_everything_but_restart(running_session):
    place(running_session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)
    running_session.step()

    assert running_session.toggle_pause() is False
    assert running_session.select_difficulty(1) is False
    assert running_session.change_direction(Direction.UP) is False
    assert running_session.state is GameState.GAME_OVER

    assert running_session.restart() is True
    assert running_session.state is GameState.MENU
    assert running_session.score == 0
    assert running_session.level == 1
    assert len(running_session.board.snake) == 0
    assert running_session.board.food is None


def test_new_game_after_restart_resets_state(running_session):
    running_session.score = 60
    place(running_session, [Cell(0, 5), Cell(1, 5), Cell(2, 5)], direction=Direction.LEFT)
    running_session.step()
    running_session.restart()

    running_session.select_difficulty(3)

    assert running_session.score == 0
    assert running_session.level == 1
    assert running_session.interval == 100
    assert running_session.new_high_score is False
    assert running_session.board.snake.head == Cell(12, 12)


def test_session_without_collaborators():
    session = GameSession()
    session.select_difficulty(1)
    session.board.food = Food(session.board.snake.next_head(Direction.RIGHT))

    result = session.step()

    assert result.ate
    assert session.high_score == 0


def test_snapshot_reflects_session(running_session):
    running_session.toggle_pause()

    snapshot = running_session.snapshot()

    assert snapshot.state is GameState.PAUSED
    assert snapshot.paused is True
    assert snapshot.snake == running_session.board.snake.cells()
    assert snapshot.food == running_session.board.food_position
    assert snapshot.level == 1
    assert snapshot.interval == 140
    assert snapshot.difficulty == 2
    assert (snapshot.grid_width, snapshot.grid_height) == (24, 24)


def test_game_starts_on_narrowest_board(sound, store):
    session = GameSession(board=Board(4, 1, random.Random(3)), sound=sound, store=store)

    assert session.select_difficulty(1) is True
    assert len(session.board.snake) == constants.START_LENGTH
