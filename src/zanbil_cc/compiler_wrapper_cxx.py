#!/usr/bin/env python3

import sys

from zanbil_cc import compiler_wrapper


def main() -> None:
    sys.exit(compiler_wrapper.run_compiler_wrapper(is_cxx=True))


if __name__ == '__main__':
    main()
