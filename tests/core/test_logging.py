import logging
import unittest

from mintbooth.core.command import Command
from mintbooth.core.logging import configure_logging, get_logger
from tests.test_support import MintBoothTestCase


class Echo(Command[str, str]):
    def __call__(self, args: str) -> str:
        self.get_logger().info("echo: %s", args)
        return args


class LoggingTestCase(MintBoothTestCase):
    def tearDown(self) -> None:
        configure_logging(level=logging.DEBUG)

    def test_configure_logging_with_level_name(self):
        configure_logging(level="info")
        self.assertEqual(logging.INFO, logging.getLogger().level)

        with self.assertRaises(ValueError):
            configure_logging(level="LOUD")

    def test_get_logger(self):
        echo = Echo()
        self.assertEqual("Echo", get_logger(echo).name)
        self.assertEqual("Echo.sub", echo.get_logger("sub").name)

        with self.assertLogs("Echo", level=logging.INFO) as logs:
            self.assertEqual("hello", echo("hello"))
        self.assertIn("echo: hello", logs.output[0])


if __name__ == "__main__":
    unittest.main()
