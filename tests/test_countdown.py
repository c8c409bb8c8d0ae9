from countdown import Countdown
from models import GameStatus


def make_countdown(handle, renderer, hud, sleep=None):
    return Countdown(handle, renderer, hud, sleep=sleep or (lambda seconds: None))


def test_tick_takes_one_second_off(handle, renderer, hud, screen):
    countdown = make_countdown(handle, renderer, hud)

    assert countdown.tick()

    assert handle.state.time == 59
    assert handle.state.status is GameStatus.PLAYING
    assert "Time: 59" in handle.state.board.rows()[11]
    assert screen.refreshes == 1


def test_last_second_stops_the_game(handle, renderer, hud):
    handle.state.time = 1
    countdown = make_countdown(handle, renderer, hud)

    assert countdown.tick()

    assert handle.state.time == 0
    assert handle.state.status is GameStatus.STOPPED
    assert "Game is Over!" in handle.state.board.rows()[5]


def test_no_ticks_after_stop(handle, renderer, hud, screen):
    handle.state.time = 1
    countdown = make_countdown(handle, renderer, hud)
    countdown.tick()
    refreshes = screen.refreshes

    assert not countdown.tick()
    assert handle.state.time == 0
    assert screen.refreshes == refreshes


def test_time_only_goes_down(handle, renderer, hud):
    handle.state.time = 3
    countdown = make_countdown(handle, renderer, hud)

    seen = []
    while countdown.tick():
        seen.append(handle.state.time)

    assert seen == [2, 1, 0]
    assert handle.state.status is GameStatus.STOPPED


def test_shorter_time_leaves_no_stale_digits(handle, renderer, hud):
    handle.state.time = 10
    make_countdown(handle, renderer, hud).tick()

    row = handle.state.board.rows()[11]
    assert "Time: 9 " in row
    assert "Time: 90" not in row


def test_run_sleeps_before_each_tick(handle, renderer, hud):
    sleeps = []
    handle.state.time = 2
    countdown = make_countdown(handle, renderer, hud, sleep=sleeps.append)

    countdown.run()

    # two ticks to reach zero, a third that finds the game stopped
    assert sleeps == [1.0, 1.0, 1.0]
    assert handle.state.time == 0
