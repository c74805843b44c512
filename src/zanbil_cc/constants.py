import types

from typing import Mapping


# The outer toolchain driver that every invocation is handed to.
DEFAULT_DRIVER_PROGRAM = 'zig'

C_SUB_COMMAND = 'cc'
CXX_SUB_COMMAND = 'c++'

TARGET_FLAG = '--target'
TARGET_FLAG_PREFIX = TARGET_FLAG + '='

TRIPLE_COMPONENT_SEPARATOR = '-'
MIN_TRIPLE_COMPONENTS = 3

WASM32_ARCH_PREFIX = 'wasm32'
FREESTANDING_OS = 'freestanding'
WASI_OS = 'wasi'

# Rust operating system names that are spelled differently by zig. Anything not listed here is
# passed through as is.
OS_NAME_MAP: Mapping[str, str] = types.MappingProxyType({
    'darwin': 'macos',
    'windows': 'windows',
    'linux': 'linux',
    'none': FREESTANDING_OS,
    'unknown': FREESTANDING_OS,
})

# Same convention as the shell uses for "command not found", so that a missing driver can be told
# apart from a compiler that ran and failed.
EXEC_FAILURE_EXIT_CODE = 127

DRIVER_PROGRAM_ENV_VAR = 'ZANBIL_CC_ZIG'
INVOCATIONS_DIR_ENV_VAR = 'ZANBIL_CC_INVOCATIONS_DIR'
LOG_LEVEL_ENV_VAR = 'ZANBIL_CC_LOG_LEVEL'

DEFAULT_LOG_LEVEL = 'WARNING'

LOG_FORMAT = "[%(filename)s:%(lineno)d] %(asctime)s %(levelname)s: %(message)s"

C_WRAPPER_NAME = 'zanbil-cc'
CXX_WRAPPER_NAME = 'zanbil-c++'

CARGO_PROGRAM = 'cargo'
