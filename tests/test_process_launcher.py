import errno
import unittest
from unittest.mock import patch

from zanbil_cc.constants import EXEC_FAILURE_EXIT_CODE
from zanbil_cc.process_launcher import (
    ExecProcessLauncher,
    SpawnProcessLauncher,
    get_default_process_launcher,
)


class TestExecProcessLauncher(unittest.TestCase):
    @patch("os.execvp")
    def test_exec(self, mock_execvp) -> None:
        mock_execvp.side_effect = SystemExit(0)  # stands in for the process being replaced

        with self.assertRaises(SystemExit):
            ExecProcessLauncher().replace_self("zig", ("zig", "cc", "a.c"))

        mock_execvp.assert_called_once_with("zig", ["zig", "cc", "a.c"])

    @patch("os.execvp")
    def test_exec_failure(self, mock_execvp) -> None:
        mock_execvp.side_effect = FileNotFoundError(errno.ENOENT, "No such file or directory")

        with self.assertLogs(level="ERROR") as logs:
            exit_code = ExecProcessLauncher().replace_self("zig", ["zig", "cc"])

        self.assertEqual(exit_code, EXEC_FAILURE_EXIT_CODE)
        self.assertNotEqual(exit_code, 0)
        self.assertEqual(len(logs.output), 1)
        self.assertIn("zig: No such file or directory", logs.output[0])

    @patch("os.execvp")
    def test_permission_failure(self, mock_execvp) -> None:
        mock_execvp.side_effect = PermissionError(errno.EACCES, "Permission denied")

        with self.assertLogs(level="ERROR"):
            exit_code = ExecProcessLauncher().replace_self("./zig", ["./zig", "c++"])

        self.assertEqual(exit_code, EXEC_FAILURE_EXIT_CODE)


class TestSpawnProcessLauncher(unittest.TestCase):
    @patch("subprocess.call")
    def test_exits_with_child_status(self, mock_call) -> None:
        mock_call.return_value = 3

        with self.assertRaises(SystemExit) as ctx:
            SpawnProcessLauncher().replace_self("zig.exe", ["zig", "cc", "a.c"])

        self.assertEqual(ctx.exception.code, 3)
        mock_call.assert_called_once_with(["zig.exe", "cc", "a.c"])

    @patch("subprocess.call")
    def test_exits_on_success(self, mock_call) -> None:
        mock_call.return_value = 0

        with self.assertRaises(SystemExit) as ctx:
            SpawnProcessLauncher().replace_self("zig", ["zig", "cc"])

        self.assertEqual(ctx.exception.code, 0)

    @patch("subprocess.call")
    def test_launch_failure(self, mock_call) -> None:
        mock_call.side_effect = FileNotFoundError(errno.ENOENT, "No such file or directory")

        with self.assertLogs(level="ERROR"):
            exit_code = SpawnProcessLauncher().replace_self("zig", ["zig", "cc"])

        self.assertEqual(exit_code, EXEC_FAILURE_EXIT_CODE)


class TestGetDefaultProcessLauncher(unittest.TestCase):
    @patch("zanbil_cc.process_launcher.is_macos", return_value=False)
    @patch("zanbil_cc.process_launcher.is_linux", return_value=True)
    def test_linux(self, _is_linux, _is_macos) -> None:
        self.assertIsInstance(get_default_process_launcher(), ExecProcessLauncher)

    @patch("zanbil_cc.process_launcher.is_macos", return_value=True)
    @patch("zanbil_cc.process_launcher.is_linux", return_value=False)
    def test_macos(self, _is_linux, _is_macos) -> None:
        self.assertIsInstance(get_default_process_launcher(), ExecProcessLauncher)

    @patch("zanbil_cc.process_launcher.is_macos", return_value=False)
    @patch("zanbil_cc.process_launcher.is_linux", return_value=False)
    def test_other(self, _is_linux, _is_macos) -> None:
        self.assertIsInstance(get_default_process_launcher(), SpawnProcessLauncher)
