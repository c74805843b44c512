#!/usr/bin/env python3

import sys
import os
import logging
import json

from typing import Dict, List, Optional

from zanbil_cc.command_builder import build_command, format_command_line, is_cxx_invocation
from zanbil_cc.constants import C_WRAPPER_NAME, CXX_WRAPPER_NAME
from zanbil_cc.helpers import get_current_timestamp_str, init_logging, mkdir_p, str_md5, which
from zanbil_cc.process_launcher import ProcessLauncher, get_default_process_launcher
from zanbil_cc.target_triple import TripleTranslator
from zanbil_cc.wrapper_conf import WrapperConf


def write_command_line(command: List[str]) -> None:
    # Arguments may carry undecodable bytes from argv, so write them back out as raw bytes.
    sys.stdout.flush()
    sys.stdout.buffer.write(os.fsencode(format_command_line(command)) + b"\n")
    sys.stdout.buffer.flush()


class CompilerWrapper:
    invoked_name: str
    args: List[str]
    conf: WrapperConf
    launcher: ProcessLauncher

    # None means that C vs. C++ mode is determined from the name we were invoked as.
    is_cxx: Optional[bool]

    translator: TripleTranslator

    def __init__(
            self,
            invoked_name: str,
            args: List[str],
            conf: WrapperConf,
            launcher: ProcessLauncher,
            is_cxx: Optional[bool] = None) -> None:
        self.invoked_name = invoked_name
        self.args = args
        self.conf = conf
        self.launcher = launcher
        self.is_cxx = is_cxx
        self.translator = TripleTranslator()

    def get_command(self) -> List[str]:
        return build_command(
            self.invoked_name,
            self.args,
            translator=self.translator,
            driver_program=self.conf.driver_program,
            is_cxx=self.is_cxx)

    def record_invocation(self, command: List[str]) -> str:
        assert self.conf.invocations_dir is not None
        mkdir_p(self.conf.invocations_dir)
        compiler_invocation_file_path = os.path.join(
            self.conf.invocations_dir,
            'compiler_invocation_%s_%s.json' % (
                get_current_timestamp_str(),
                str_md5(format_command_line(command))))

        invocation_dict = {
            'invoked_as': self.invoked_name,
            'args': self.args,
            'command': command,
            'directory': os.getcwd()
        }
        with open(compiler_invocation_file_path, 'w') as invocation_file:
            json.dump(invocation_dict, invocation_file, indent=2)
        return compiler_invocation_file_path

    def run(self) -> int:
        """
        Prints the rewritten command and hands the process over to it. Only returns if the driver
        program could not be started, with the exit code to use.
        """
        command = self.get_command()

        write_command_line(command)

        if self.conf.invocations_dir:
            invocation_file_path = self.record_invocation(command)
            logging.info("Recorded compiler invocation in %s", invocation_file_path)

        return self.launcher.replace_self(command[0], command)


def run_compiler_wrapper(is_cxx: Optional[bool] = None) -> int:
    conf = WrapperConf.from_env()
    init_logging(conf.log_level)
    compiler_wrapper = CompilerWrapper(
        invoked_name=os.path.basename(sys.argv[0]),
        args=sys.argv[1:],
        conf=conf,
        launcher=get_default_process_launcher(),
        is_cxx=is_cxx)
    logging.debug(
        "Running as %s, C++ mode: %s",
        compiler_wrapper.invoked_name,
        is_cxx if is_cxx is not None else is_cxx_invocation(compiler_wrapper.invoked_name))
    return compiler_wrapper.run()


def get_cargo_env_for_compiler_wrapper() -> Dict[str, str]:
    return dict(
        CC=which(C_WRAPPER_NAME) or C_WRAPPER_NAME,
        CXX=which(CXX_WRAPPER_NAME) or CXX_WRAPPER_NAME,
    )


def main() -> None:
    sys.exit(run_compiler_wrapper())


if __name__ == '__main__':
    main()
