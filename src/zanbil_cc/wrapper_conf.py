import logging
import os

from typing import Mapping, Optional

from zanbil_cc.constants import (
    DEFAULT_DRIVER_PROGRAM,
    DEFAULT_LOG_LEVEL,
    DRIVER_PROGRAM_ENV_VAR,
    INVOCATIONS_DIR_ENV_VAR,
    LOG_LEVEL_ENV_VAR,
)


def parse_log_level(level_name: str) -> str:
    normalized_level_name = level_name.strip().upper()
    if not isinstance(logging.getLevelName(normalized_level_name), int):
        raise ValueError(
            "Invalid log level in %s: %r" % (LOG_LEVEL_ENV_VAR, level_name))
    return normalized_level_name


class WrapperConf:
    # Program that the rewritten command is handed to, looked up in PATH.
    driver_program: str

    # If set, every invocation is recorded as a JSON file in this directory.
    invocations_dir: Optional[str]

    log_level: str

    def __init__(
            self,
            driver_program: str = DEFAULT_DRIVER_PROGRAM,
            invocations_dir: Optional[str] = None,
            log_level: str = DEFAULT_LOG_LEVEL) -> None:
        self.driver_program = driver_program
        self.invocations_dir = invocations_dir
        self.log_level = parse_log_level(log_level)

    @staticmethod
    def from_env(env: Optional[Mapping[str, str]] = None) -> 'WrapperConf':
        if env is None:
            env = os.environ
        return WrapperConf(
            driver_program=env.get(DRIVER_PROGRAM_ENV_VAR) or DEFAULT_DRIVER_PROGRAM,
            invocations_dir=env.get(INVOCATIONS_DIR_ENV_VAR) or None,
            log_level=env.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL)
