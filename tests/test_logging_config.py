import logging

from trigger_volumes.logging_config import setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "triggers.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        assert logger.name == "trigger_volumes"
        assert len(logger.handlers) == 2

        logger = setup_logging(logging.WARNING)
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_module_loggers_are_children(tmp_path):
    log_file = tmp_path / "triggers.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        logging.getLogger("trigger_volumes.manager").warning("hello from manager")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from manager" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
