import logging

from revlines.log_setup import setup_logger


def _cleanup(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_does_not_stack_handlers():
    logger = setup_logger("revlines.test.stack")
    try:
        setup_logger("revlines.test.stack")
        assert len(logger.handlers) == 1
    finally:
        _cleanup(logger)


def test_level_from_name():
    logger = setup_logger("revlines.test.level", log_level="debug")
    try:
        assert logger.level == logging.DEBUG
    finally:
        _cleanup(logger)


def test_unknown_level_falls_back_to_info():
    logger = setup_logger("revlines.test.unknown", log_level="chatty")
    try:
        assert logger.level == logging.INFO
    finally:
        _cleanup(logger)


def test_file_handler_creates_directory(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logger("revlines.test.file", log_file=log_file)
    try:
        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
    finally:
        _cleanup(logger)
