import io
import json
import unittest
from contextlib import redirect_stderr

from maybepy import ConsoleLogger, get_logger, set_logger, attempt, Failure


def _boom():
    raise Failure("x")


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering(self):
        log = ConsoleLogger("t", level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.debug("hidden")
            log.info("hidden")
            log.warn("shown")
            log.error("shown too")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 2)
        self.assertIn("t WARN: shown", lines[0])
        self.assertIn("t ERROR: shown too", lines[1])

    def test_bind_and_plain_fields(self):
        log = ConsoleLogger("t", level="DEBUG").bind(req="r1")
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.info("hello", b=2)
        self.assertTrue(buf.getvalue().rstrip().endswith("t INFO: hello b=2 req=r1"))
        self.assertEqual(log.level_name, "DEBUG")

    def test_json_output(self):
        log = ConsoleLogger("t", level="INFO", json_output=True, context={"svc": "x"})
        buf = io.StringIO()
        with redirect_stderr(buf):
            log.info("msg", n=1)
        rec = json.loads(buf.getvalue())
        self.assertEqual(rec["name"], "t")
        self.assertEqual(rec["msg"], "msg")
        self.assertEqual(rec["fields"], {"svc": "x", "n": 1})
        self.assertIn("ts", rec)

    def test_set_level(self):
        log = ConsoleLogger(level="ERROR")
        self.assertFalse(log.enabled("WARN"))
        log.set_level("debug")
        self.assertTrue(log.enabled("DEBUG"))
        log.set_level("bogus")
        self.assertEqual(log.level_name, "DEBUG")


class TestDefaultLogger(unittest.TestCase):
    def setUp(self):
        self.saved = get_logger()

    def tearDown(self):
        set_logger(self.saved)

    def test_default_is_warn(self):
        self.assertEqual(get_logger().level_name, "WARN")

    def test_set_logger_is_used_by_attempt(self):
        set_logger(ConsoleLogger("pkg", level="DEBUG"))
        buf = io.StringIO()
        with redirect_stderr(buf):
            attempt(_boom)
        self.assertIn("pkg DEBUG: captured failure", buf.getvalue())
        self.assertIn("kind=Failure", buf.getvalue())
