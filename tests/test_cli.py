"""
Tests for the command-line interface.
"""

import json
import unittest
from io import StringIO
from unittest.mock import MagicMock, patch

from econet24 import cli
from econet24.errors import AuthError
from econet24.models import ByIndex, ByKey, ByName, DeviceParameters

BASE_ARGS = ["--user", "alice", "--password", "s3cret", "--uid", "UID1"]


class TestParseArgs(unittest.TestCase):
    def test_set_requires_one_address(self):
        with patch("sys.stderr", new=StringIO()):
            with self.assertRaises(SystemExit):
                cli.parse_args(BASE_ARGS + ["set", "--key", "a", "--index", "1", "5"])

    def test_defaults(self):
        args = cli.parse_args(BASE_ARGS + ["params"])
        self.assertTrue(args.verify_ssl)
        self.assertIsNone(args.timeout)
        self.assertEqual(args.command, "params")


class TestRunCommand(unittest.TestCase):
    def setUp(self):
        self.client = MagicMock()

    def _run(self, argv):
        cli.run_command(self.client, cli.parse_args(BASE_ARGS + argv))

    def test_params_prints_json(self):
        self.client.read_parameters.return_value = DeviceParameters(boiler_power=50)
        with patch("sys.stdout", new=StringIO()) as out:
            self._run(["params"])
        self.assertEqual(json.loads(out.getvalue())["boilerPower"], 50)

    def test_boiler_status(self):
        self._run(["boiler-status", "work"])
        self.client.set_boiler_status.assert_called_once_with("work")

    def test_huw_heater(self):
        self._run(["huw-heater", "1"])
        self.client.set_hot_water_heater_status.assert_called_once_with(1)

    def test_temperatures(self):
        self._run(["co-temp", "65"])
        self._run(["huw-temp", "50"])
        self.client.set_co_temperature.assert_called_once_with(65)
        self.client.set_hot_water_temperature.assert_called_once_with(50)

    def test_raw_set(self):
        self._run(["set", "--key", "1280", "60"])
        self._run(["set", "--index", "59", "1"])
        self._run(["set", "--name", "BOILER_STATUS", "3"])
        self.assertEqual(
            [c.args for c in self.client.write_parameter.call_args_list],
            [(ByKey("1280"), 60), (ByIndex(59), 1), (ByName("BOILER_STATUS"), 3)],
        )


class TestMain(unittest.TestCase):
    @patch("econet24.cli.setup_logging")
    @patch("econet24.cli.Econet24Client")
    def test_login_failure_exits_1(self, mock_client, _mock_logging):
        mock_client.side_effect = AuthError("credentials rejected (HTTP 403)")
        with self.assertRaises(SystemExit) as ctx:
            cli.main(BASE_ARGS + ["params"])
        self.assertEqual(ctx.exception.code, 1)

    @patch("econet24.cli.setup_logging")
    @patch("econet24.cli.Econet24Client")
    def test_success_runs_command(self, mock_client, _mock_logging):
        instance = mock_client.return_value.__enter__.return_value
        cli.main(BASE_ARGS + ["--timeout", "5", "huw-heater", "0"])
        mock_client.assert_called_once_with(
            "alice", "s3cret", "UID1", cli.DEFAULT_HOST, verify_ssl=True, timeout=5.0,
        )
        instance.set_hot_water_heater_status.assert_called_once_with(0)

    @patch("econet24.cli.setup_logging")
    def test_missing_uid_exits_2(self, _mock_logging):
        with self.assertRaises(SystemExit) as ctx:
            cli.main(["--user", "alice", "--password", "x", "--uid", "", "params"])
        self.assertEqual(ctx.exception.code, 2)


if __name__ == "__main__":
    unittest.main()
