import io
import json

import pytest

from minpath.logger import NoopLogger, StdLogger


def test_plain_format():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.info("run", nodes=3, queue="heap")
    assert buf.getvalue() == "info run nodes=3 queue=heap\n"


def test_level_filtering():
    buf = io.StringIO()
    log = StdLogger(level="info", stream=buf)
    log.debug("hidden")
    log.warning("shown")
    assert buf.getvalue() == "warning shown\n"


def test_json_format():
    buf = io.StringIO()
    StdLogger(level="debug", json_fmt=True, stream=buf).debug("solve.done", pops=4, source=("a", 1))
    record = json.loads(buf.getvalue())
    assert record == {"level": "debug", "event": "solve.done", "pops": 4, "source": ["a", 1]}


def test_unknown_level():
    with pytest.raises(ValueError):
        StdLogger(level="trace")


def test_noop_logger_accepts_everything():
    log = NoopLogger()
    log.info("x", a=1)
    log.debug("y")
    log.warning("z", b=2)
