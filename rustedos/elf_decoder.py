"""Decoding of 64-bit little-endian ELF headers and program headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

ELF_MAGIC = b"\x7fELF"
EI_NIDENT = 16

_HEADER = struct.Struct("<16sHHIQQQIHHHHHH")
_PROGRAM_HEADER = struct.Struct("<IIQQQQQQ")

PT_LOAD = 1
PF_X = 1 << 0
PF_W = 1 << 1
PF_R = 1 << 2


@dataclass(frozen=True)
class ElfHeader:
    """The ELF file header."""

    e_ident: bytes
    e_type: int
    e_machine: int
    e_version: int
    e_entry: int
    e_phoff: int
    e_shoff: int
    e_flags: int
    e_ehsize: int
    e_phentsize: int
    e_phnum: int
    e_shentsize: int
    e_shnum: int
    e_shstrndx: int

    def is_valid(self) -> bool:
        """Whether the identification starts with the ELF magic number."""
        return self.e_ident[:4] == ELF_MAGIC

    def entry(self) -> int:
        """The program entry point."""
        return self.e_entry


@dataclass(frozen=True)
class ProgramHeader:
    """One program header table entry."""

    p_type: int
    p_flags: int
    p_offset: int
    p_vaddr: int
    p_paddr: int
    p_filesz: int
    p_memsz: int
    p_align: int

    def is_load(self) -> bool:
        return self.p_type == PT_LOAD

    def is_readable(self) -> bool:
        return bool(self.p_flags & PF_R)

    def is_writable(self) -> bool:
        return bool(self.p_flags & PF_W)

    def is_executable(self) -> bool:
        return bool(self.p_flags & PF_X)


@dataclass(frozen=True)
class ElfFile:
    """An ELF header with its program headers."""

    header: ElfHeader
    program_headers: tuple[ProgramHeader, ...]

    @classmethod
    def parse(cls, data) -> ElfFile:
        """Decode ELF data; raises ValueError if it is not a well-formed ELF."""
        data = bytes(data)
        try:
            header = ElfHeader(*_HEADER.unpack_from(data, 0))
        except struct.error as err:
            raise ValueError(f"truncated ELF header: {err}") from None
        if not header.is_valid():
            raise ValueError("invalid ELF magic number")
        try:
            program_headers = tuple(
                ProgramHeader(
                    *_PROGRAM_HEADER.unpack_from(data, header.e_phoff + header.e_phentsize * i)
                )
                for i in range(header.e_phnum)
            )
        except struct.error as err:
            raise ValueError(f"truncated program header table: {err}") from None
        return cls(header, program_headers)