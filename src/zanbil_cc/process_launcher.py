import logging
import os
import subprocess
import sys

from typing import List, NoReturn, Sequence

from sys_detection import is_linux, is_macos

from zanbil_cc.constants import EXEC_FAILURE_EXIT_CODE


class ProcessLauncher:
    """
    Hands control of the current process over to another program. replace_self() does not return
    if the program was started. If it could not be started, it returns the exit code the wrapper
    should terminate with.
    """

    def replace_self(self, program: str, args: Sequence[str]) -> int:
        raise NotImplementedError()

    def handle_launch_failure(self, program: str, error: OSError) -> int:
        logging.error("%s: %s", program, error.strerror or error)
        return EXEC_FAILURE_EXIT_CODE


class ExecProcessLauncher(ProcessLauncher):
    """
    Replaces the process image using execvp. The program is looked up in PATH, and the
    environment and open file descriptors are inherited.
    """

    def replace_self(self, program: str, args: Sequence[str]) -> int:
        try:
            os.execvp(program, list(args))
        except OSError as error:
            return self.handle_launch_failure(program, error)
        raise AssertionError("execvp returned without an error")


class SpawnProcessLauncher(ProcessLauncher):
    """
    For platforms where exec does not really replace the calling process. Runs the program as a
    child, waits for it and exits with its exit code.
    """

    def exit_with(self, exit_code: int) -> NoReturn:
        sys.exit(exit_code)

    def replace_self(self, program: str, args: Sequence[str]) -> int:
        child_args: List[str] = [program] + list(args[1:])
        try:
            exit_code = subprocess.call(child_args)
        except OSError as error:
            return self.handle_launch_failure(program, error)
        self.exit_with(exit_code)


def get_default_process_launcher() -> ProcessLauncher:
    if is_linux() or is_macos():
        return ExecProcessLauncher()
    return SpawnProcessLauncher()
