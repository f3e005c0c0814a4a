import ctypes
import platform
from ctypes.util import find_library

from ..lexer.lexer import lexer
from ..parser.parser import parser
from ..codegen.sprig import compile_program


def parse_code(code, filename="<stdin>"):
    """Source text -> list of top-level expression nodes."""
    scanner = lexer.clone()
    scanner.lineno = 1
    scanner.filename = filename
    return parser.parse(code, lexer=scanner)


def parse_file(path):
    with open(path, "r", encoding="utf-8") as f:
        code = f.read()
    return parse_code(code, filename=path)


def compile_source(code, filename="<stdin>", **options):
    """Source text -> LLVM IR text."""
    return compile_program(parse_code(code, filename), **options)


def resolve_c_library(name="c"):
    """
    Map a bare library name like "c" to the right runtime file name for this platform.
    """
    plat = platform.system().lower()
    if name.lower() in ("c", "stdio"):
        if plat == "windows":
            return find_library("msvcrt") or "msvcrt.dll"
        elif plat == "darwin":
            return find_library("c") or "libc.dylib"
        else:
            return find_library("c") or "libc.so.6"
    return find_library(name) or name


def flush_c_stdout():
    """printf output from JIT-ed code sits in C's buffer until flushed."""
    libc = ctypes.CDLL(resolve_c_library("c"))
    libc.fflush(None)
