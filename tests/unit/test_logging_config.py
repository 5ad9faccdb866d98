import io
import logging
from archns.bootstrap import bootstrap
from archns.logging_config import ARCHNS_LOGGER_NAME, setup_logging

def test_setup_logging_emits_registration_messages():
    logger = logging.getLogger(ARCHNS_LOGGER_NAME)
    saved = (list(logger.handlers), logger.level, logger.propagate)
    buf = io.StringIO()
    try:
        setup_logging("DEBUG", stream=buf, force=True)
        bootstrap()
        out = buf.getvalue()
        assert "[DEBUG] archns.namespace" in out
        assert "espacio de nombres listo" in out
    finally:
        logger.handlers[:] = saved[0]
        logger.setLevel(saved[1])
        logger.propagate = saved[2]
