import io

import pytest

from bstengine import log


@pytest.fixture(autouse=True)
def logbuf():
    """Route the module logger into a buffer for the duration of a test."""
    saved = log.logger
    buf = io.StringIO()
    log.logger = log.Logger(logfile=buf)
    yield buf
    log.logger = saved
