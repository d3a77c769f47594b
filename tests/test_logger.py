import io
import json
import unittest
from contextlib import redirect_stderr

from optionpy import ConsoleLogger, log_inspect, present, absent, from_nullable


class TestConsoleLogger(unittest.TestCase):
    def test_text_output_with_bound_fields(self):
        logger = ConsoleLogger("opt", level="DEBUG").bind(request="r1")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hello", n=1)
        line = buf.getvalue().strip()
        self.assertIn("opt INFO: hello", line)
        self.assertIn("n=1", line)
        self.assertIn("request='r1'", line)

    def test_json_output(self):
        logger = ConsoleLogger(json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.warn("careful", key="v")
        rec = json.loads(buf.getvalue().strip())
        self.assertEqual(rec["name"], "optionpy")
        self.assertEqual(rec["level"], "WARN")
        self.assertEqual(rec["msg"], "careful")
        self.assertEqual(rec["fields"], {"key": "v"})

    def test_level_filtering(self):
        logger = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hidden")
            logger.error("shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("shown", lines[0])

    def test_set_level_and_unknown_levels(self):
        logger = ConsoleLogger(level="nope")
        self.assertEqual(logger.level_name, "INFO")
        logger.set_level("debug")
        self.assertEqual(logger.level_name, "DEBUG")
        logger.set_level("nope")
        self.assertEqual(logger.level_name, "DEBUG")
        with self.assertRaises(ValueError):
            logger.log("TRACE", "x")


class TestLogInspect(unittest.TestCase):
    def test_logs_present_payload_only(self):
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            out = present("8081").inspect(log_inspect(logger, "raw port")).map(int)
            absent().inspect(log_inspect(logger, "never"))
        self.assertEqual(out.unwrap(), 8081)
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        rec = json.loads(lines[0])
        self.assertEqual(rec["level"], "DEBUG")
        self.assertEqual(rec["fields"], {"value": "8081"})

    def test_custom_field_and_level(self):
        logger = ConsoleLogger(json_output=True)
        buf = io.StringIO()
        with redirect_stderr(buf):
            from_nullable(443).inspect(log_inspect(logger, "port", level="info", field="port"))
        rec = json.loads(buf.getvalue().strip())
        self.assertEqual(rec["level"], "INFO")
        self.assertEqual(rec["fields"], {"port": 443})

    def test_unknown_level_rejected(self):
        with self.assertRaises(ValueError):
            log_inspect(ConsoleLogger(), "x", level="loud")
