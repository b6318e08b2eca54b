import logging

from connectfour.debug import LOGGER_NAME, DebugLevel, DebugManager, debug
from connectfour.game.engine import GameEngine
from connectfour.game.env import ConnectFourEnv


def test_rejections_logged_at_debug(caplog):
    debug.configure(level=DebugLevel.DEBUG)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        GameEngine().drop_piece(99)
    assert any("[engine] Rejected move" in r.getMessage() and "COLUMN_OUT_OF_RANGE" in r.getMessage()
               for r in caplog.records)


def test_win_logged_at_info(caplog):
    debug.configure(level=DebugLevel.INFO)
    engine = GameEngine()
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        for column in [3, 0, 3, 0, 3, 0, 3]:
            engine.drop_piece(column)
    messages = [r.getMessage() for r in caplog.records]
    assert any("Player 1 wins" in m for m in messages)
    assert not any("Rejected" in m for m in messages)


def test_default_level_is_quiet(caplog):
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        GameEngine().drop_piece(99)
    assert not caplog.records


def test_component_filter(caplog):
    debug.configure(level=DebugLevel.DEBUG, components=["env"])
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        GameEngine().drop_piece(99)
        debug.debug("hello", "env")
    assert [r.getMessage() for r in caplog.records] == ["[env] hello"]


def test_disabled_manager_logs_nothing(caplog):
    debug.configure(level=DebugLevel.DEBUG, enabled=False)
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        debug.error("nope")
    assert not caplog.records


def test_set_from_string():
    manager = DebugManager()
    manager.set_from_string("TRACE")
    assert manager.level == DebugLevel.TRACE
    manager.set_from_string("bogus")
    assert manager.level == DebugLevel.TRACE
    manager.set_from_string("warning")


def test_log_file(tmp_path):
    path = tmp_path / "engine.log"
    debug.configure(level=DebugLevel.INFO, log_file=str(path))
    debug.info("written to file", "test")
    debug.configure(log_file="")
    assert "[test] written to file" in path.read_text()


def test_timers():
    manager = DebugManager()
    manager.start_timer("scan")
    assert manager.end_timer("scan") >= 0
    assert manager.end_timer("scan") is None


def test_extra_manager_leaves_singleton_level_alone(caplog):
    debug.configure(level=DebugLevel.DEBUG)
    DebugManager()
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        debug.debug("still visible", "test")
    assert debug.level == DebugLevel.DEBUG
    assert [r.getMessage() for r in caplog.records] == ["[test] still visible"]


def test_rejected_env_action_logged_at_debug(caplog):
    debug.configure(level=DebugLevel.DEBUG, components=["env"])
    env = ConnectFourEnv()
    env.reset()
    caplog.clear()
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        env.step(7)
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [
        (logging.DEBUG, "[env] Invalid action 7: COLUMN_OUT_OF_RANGE")]
