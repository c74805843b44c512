"""
Translation of Rust target triples (arch-vendor-os[-abi]) into zig target triples (arch-os[-abi]).

Zig has no vendor component, so the vendor is always dropped. The translation is deliberately
lenient: anything that does not look like a triple, including triples that are already in zig
form or values like "native", comes back unchanged or with a best-effort rewrite, never an error.
Note that translating an already translated triple is not a no-op, e.g. "x86_64-linux-gnu" is
read as arch "x86_64", vendor "linux", os "gnu" and becomes "x86_64-gnu".
"""

from typing import List, Mapping, Optional

from zanbil_cc.constants import (
    FREESTANDING_OS,
    MIN_TRIPLE_COMPONENTS,
    OS_NAME_MAP,
    TRIPLE_COMPONENT_SEPARATOR,
    WASI_OS,
    WASM32_ARCH_PREFIX,
)


def split_triple_components(triple: str) -> List[str]:
    components = triple.split(TRIPLE_COMPONENT_SEPARATOR)
    # A trailing separator does not start an empty component.
    if len(components) > 1 and components[-1] == '':
        components.pop()
    return components


def is_wasm32_arch(arch: str) -> bool:
    return arch.startswith(WASM32_ARCH_PREFIX)


class TargetTriple:
    arch: str
    vendor: str
    os: str

    # Empty if the triple has no environment/ABI component.
    abi: str

    def __init__(self, arch: str, vendor: str, os: str, abi: str = '') -> None:
        self.arch = arch
        self.vendor = vendor
        self.os = os
        self.abi = abi

    @staticmethod
    def parse(triple: str) -> Optional['TargetTriple']:
        """
        Parses a hyphen-separated triple. Returns None if there are fewer than three components.
        Components after the fourth one are ignored.
        """
        components = split_triple_components(triple)
        if len(components) < MIN_TRIPLE_COMPONENTS:
            return None
        abi = components[3] if len(components) > 3 else ''
        return TargetTriple(
            arch=components[0], vendor=components[1], os=components[2], abi=abi)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TargetTriple):
            return NotImplemented
        return (self.arch, self.vendor, self.os, self.abi) == (
            other.arch, other.vendor, other.os, other.abi)

    def __repr__(self) -> str:
        return 'TargetTriple(arch=%r, vendor=%r, os=%r, abi=%r)' % (
            self.arch, self.vendor, self.os, self.abi)


class TripleTranslator:
    os_name_map: Mapping[str, str]

    def __init__(self, os_name_map: Mapping[str, str] = OS_NAME_MAP) -> None:
        self.os_name_map = os_name_map

    def map_os_name(self, os_name: str) -> str:
        return self.os_name_map.get(os_name, os_name)

    def translate(self, triple: str) -> str:
        parsed = TargetTriple.parse(triple)
        if parsed is None:
            return triple

        zig_os = self.map_os_name(parsed.os)

        if is_wasm32_arch(parsed.arch):
            if zig_os == FREESTANDING_OS:
                return 'wasm32-' + FREESTANDING_OS
            if zig_os == WASI_OS:
                return 'wasm32-' + WASI_OS
            # Other operating systems fall through to the generic form below, keeping the
            # original arch string (e.g. "wasm32-emscripten").

        zig_triple = parsed.arch + TRIPLE_COMPONENT_SEPARATOR + zig_os
        if parsed.abi:
            zig_triple += TRIPLE_COMPONENT_SEPARATOR + parsed.abi
        return zig_triple


_default_translator = TripleTranslator()


def translate_target_triple(triple: str) -> str:
    return _default_translator.translate(triple)
