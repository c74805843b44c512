#!/usr/bin/env python3

import logging
import os
import subprocess
import sys

from typing import Dict, List, Mapping, Optional

from zanbil_cc.compiler_wrapper import get_cargo_env_for_compiler_wrapper
from zanbil_cc.constants import CARGO_PROGRAM, EXEC_FAILURE_EXIT_CODE
from zanbil_cc.helpers import init_logging
from zanbil_cc.wrapper_conf import WrapperConf


def get_cargo_env(base_env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Environment for cargo. CC and CXX point to the target-translating compiler wrappers unless the
    user has already set them.
    """
    env = dict(os.environ if base_env is None else base_env)
    for env_var_name, wrapper_path in get_cargo_env_for_compiler_wrapper().items():
        if not env.get(env_var_name):
            logging.debug("Setting %s to %s", env_var_name, wrapper_path)
            env[env_var_name] = wrapper_path
    return env


def run_cargo(cargo_args: List[str], base_env: Optional[Mapping[str, str]] = None) -> int:
    cmd_line = [CARGO_PROGRAM] + cargo_args
    logging.info("Running command: %s (current directory: %s)", cmd_line, os.getcwd())
    try:
        exit_code = subprocess.call(cmd_line, env=get_cargo_env(base_env))
    except OSError as error:
        logging.error("%s: %s", CARGO_PROGRAM, error.strerror or error)
        return EXEC_FAILURE_EXIT_CODE
    if exit_code < 0:
        # Killed by a signal.
        return 1
    return exit_code


def main() -> None:
    conf = WrapperConf.from_env()
    init_logging(conf.log_level)
    sys.exit(run_cargo(sys.argv[1:]))


if __name__ == '__main__':
    main()
