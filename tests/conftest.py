import io

import pytest
import logging


@pytest.fixture
def capture_logs():
    """Fixture to capture log output during tests."""
    log_stream = io.StringIO()
    handler = logging.StreamHandler(log_stream)
    logger = logging.getLogger("validatable")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    yield log_stream  # Yield the stream to the test function

    # Cleanup after the test
    logger.removeHandler(handler)
    log_stream.close()


@pytest.fixture
def scratch_registry():
    """A private copy of the rule registry, so tests can register freely."""
    from validatable.rules import RULE_REGISTRY

    return dict(RULE_REGISTRY)
