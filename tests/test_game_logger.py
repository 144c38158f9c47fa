import json
import logging

from termdle.utils import game_logger as game_logger_module
from termdle.utils.game_logger import GameLogger


def read_entries(logger):
    lines = logger.log_file.read_text(encoding="utf-8").splitlines()
    return [line.split(" | ", 2) for line in lines]


def test_writes_structured_entries(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), level="INFO")
    logger.log_game_event("round_won", 3, secret_word="robot")
    logger.log_user_action("submit_guess", 3, guess="opera")

    (_, level, message), (_, _, second) = read_entries(logger)
    assert level == "INFO"
    entry = json.loads(message)
    assert entry["event_type"] == "GAME_EVENT"
    assert entry["action"] == "round_won"
    assert entry["details"] == {"round": 3, "secret_word": "robot"}
    assert json.loads(second)["event_type"] == "USER_ACTION"


def test_log_error(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path))
    logger.log_error(ValueError("empty pool"), "startup")
    (_, level, message), = read_entries(logger)
    assert level == "ERROR"
    details = json.loads(message)["details"]
    assert details == {"error_type": "ValueError", "error_message": "empty pool"}


def test_level_filters_file_output(tmp_path):
    logger = GameLogger(log_dir=str(tmp_path), level="WARNING")
    logger.log_game_event("round_started", 1)
    assert logger.log_file.read_text(encoding="utf-8") == ""


def test_console_only_logger_has_no_file():
    logger = GameLogger(log_dir=None)
    assert logger.log_file is None
    assert [type(h) for h in logger.logger.handlers] == [logging.StreamHandler]


def test_reinitialising_replaces_handlers(tmp_path):
    GameLogger(log_dir=str(tmp_path / "a"))
    logger = GameLogger(log_dir=str(tmp_path / "b"))
    assert len(logger.logger.handlers) == 2


def test_global_logger(tmp_path):
    logger = game_logger_module.initialize_game_logger(str(tmp_path), "DEBUG")
    assert game_logger_module.get_game_logger() is logger
    assert logger.logger.level == logging.DEBUG
