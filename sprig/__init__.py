from .codegen.sprig import SprigCompiler, compile_program
from .codegen.compiletime.errors import (
    SprigError,
    CompileError,
    UndefinedSymbol,
    ArityMismatch,
    InvalidCallTarget,
    UnassignedFunction,
    UnsupportedNode,
    NoTailExpression,
    UnknownParameterShape,
)
from .parser.errors import LexError, ParseError
from .utils.helpers import parse_code, parse_file, compile_source

__version__ = "0.1.0"
