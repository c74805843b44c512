import logging

from typing import List, Optional, Sequence

from zanbil_cc.constants import (
    C_SUB_COMMAND,
    CXX_SUB_COMMAND,
    DEFAULT_DRIVER_PROGRAM,
    TARGET_FLAG,
    TARGET_FLAG_PREFIX,
)
from zanbil_cc.target_triple import TripleTranslator


def is_cxx_invocation(invoked_name: str) -> bool:
    return '++' in invoked_name


def get_sub_command(invoked_name: str, is_cxx: Optional[bool] = None) -> str:
    if is_cxx is None:
        is_cxx = is_cxx_invocation(invoked_name)
    return CXX_SUB_COMMAND if is_cxx else C_SUB_COMMAND


def build_command(
        invoked_name: str,
        raw_args: Sequence[str],
        translator: Optional[TripleTranslator] = None,
        driver_program: str = DEFAULT_DRIVER_PROGRAM,
        is_cxx: Optional[bool] = None) -> List[str]:
    """
    Builds the zig command line for a compiler invocation. The sub-command is picked from the name
    the wrapper was invoked as, unless is_cxx is given explicitly. Values of "--target <triple>"
    and "--target=<triple>" are translated, every other argument is forwarded in order.
    """
    if translator is None:
        translator = TripleTranslator()

    command = [driver_program, get_sub_command(invoked_name, is_cxx)]

    def translate(triple: str) -> str:
        zig_triple = translator.translate(triple)
        logging.debug("Translated target %s to %s", triple, zig_triple)
        return zig_triple

    i = 0
    while i < len(raw_args):
        arg = raw_args[i]
        if arg == TARGET_FLAG and i + 1 < len(raw_args):
            command.append(TARGET_FLAG)
            command.append(translate(raw_args[i + 1]))
            i += 2
            continue
        if arg.startswith(TARGET_FLAG_PREFIX):
            command.append(TARGET_FLAG_PREFIX + translate(arg[len(TARGET_FLAG_PREFIX):]))
        else:
            command.append(arg)
        i += 1

    return command


def format_command_line(command: Sequence[str]) -> str:
    return ' '.join(command)
