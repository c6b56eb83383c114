import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from die_roll.cli import main, simulate
from die_roll.core.config import RollConfig


class TestCli(unittest.TestCase):
    """
    End-to-end tests for the command-line entry point:
      - A readable device produces one report line per observed face and exit code 0.
      - An unreadable device aborts with a non-zero exit before anything is printed.
      - Zero trials prints nothing and succeeds.
    """

    def _device_with(self, data: bytes) -> str:
        fd, path = tempfile.mkstemp()
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        self.addCleanup(os.remove, path)
        return path

    def test_default_config(self):
        cfg = RollConfig()
        self.assertEqual(cfg.trials, 10_000)
        self.assertEqual(cfg.faces, 6)
        self.assertEqual(cfg.entropy_device, "/dev/urandom")

    def test_uniform_device_reports_every_face(self):
        path = self._device_with(bytes(range(6)) * 1000)
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([], config=RollConfig(trials=6000, entropy_device=path))
        self.assertEqual(code, 0)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 6)
        for face, line in enumerate(lines, start=1):
            self.assertEqual(line, f"Value: {face}, frequency: 1000, percentage: 16.666666666666668%")

    def test_missing_device_exits_non_zero_without_output(self):
        missing = os.path.join(tempfile.gettempdir(), "die-roll-no-such-device")
        out = io.StringIO()
        with redirect_stdout(out), self.assertLogs("die_roll.cli", level="ERROR"):
            with self.assertRaises(SystemExit) as ctx:
                main([], config=RollConfig(entropy_device=missing))
        self.assertNotIn(ctx.exception.code, (0, None))
        self.assertEqual(out.getvalue(), "")

    def test_short_device_aborts_whole_run(self):
        path = self._device_with(bytes(10))
        out = io.StringIO()
        with redirect_stdout(out), self.assertLogs("die_roll.cli", level="ERROR"):
            with self.assertRaises(SystemExit):
                main([], config=RollConfig(trials=11, entropy_device=path))
        self.assertEqual(out.getvalue(), "")

    def test_zero_trials_prints_nothing(self):
        path = self._device_with(b"")
        out = io.StringIO()
        with redirect_stdout(out):
            code = main([], config=RollConfig(trials=0, entropy_device=path))
        self.assertEqual(code, 0)
        self.assertEqual(out.getvalue(), "")

    def test_simulate_on_urandom(self):
        if not os.path.exists("/dev/urandom"):
            self.skipTest("no /dev/urandom on this platform")
        table = simulate(RollConfig(trials=500))
        self.assertEqual(table.total, 500)
        self.assertTrue(set(table).issubset(range(1, 7)))


if __name__ == '__main__':
    unittest.main()
