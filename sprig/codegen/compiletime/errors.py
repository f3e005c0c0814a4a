# =============================================================================
# Sprig Expression Language Compiler
#
# -----------------------------------------------------------------------------
# Copyright (C) 2025 The Sprig Authors
#
# This file is part of the Sprig Expression Language Compiler.
#
# Sprig is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# Sprig is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Sprig.  If not, see <https://www.gnu.org/licenses/>.
# =============================================================================
import sys


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[38;5;196m"
    BLUE = "\033[38;5;39m"
    CYAN = "\033[38;5;51m"
    GRAY = "\033[38;5;240m"


class SprigError(Exception):
    """Base class for every error the compiler reports."""

    hint = None

    def __init__(self, message, node=None, lineno=None, col_offset=None):
        super().__init__(message)
        self.message = message
        self.node = node
        self.lineno = lineno if lineno is not None else getattr(node, "lineno", 0)
        self.col_offset = col_offset if col_offset is not None else getattr(node, "col_offset", 0)


# ---------------------------------------------------------------------------
# Code generation errors. The first one raised aborts the whole compilation.
# ---------------------------------------------------------------------------
class CompileError(SprigError):
    """Custom exception to stop compilation gracefully."""

    partial_ir = ""

    def report(self):
        """Message followed by the IR built up to the failure (debugging only)."""
        return f"{self.message}\n{self.partial_ir}"


class UndefinedSymbol(CompileError):
    def __init__(self, name, node=None):
        super().__init__(f"undefined symbol '{name}'", node)
        self.name = name


class ArityMismatch(CompileError):
    def __init__(self, name, expected, actual, node=None):
        super().__init__(
            f"incorrect arguments to call '{name}': got {actual}, expected {expected}", node
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class InvalidCallTarget(CompileError):
    hint = "only functions, or variables holding a function, can be called"

    def __init__(self, name, node=None):
        super().__init__(f"'{name}' is not callable", node)
        self.name = name


class UnassignedFunction(CompileError):
    hint = "bind the function to a name: f = (x) { ... }"

    def __init__(self, node=None):
        super().__init__("unassigned function", node)


class UnsupportedNode(CompileError):
    def __init__(self, kind, node=None):
        super().__init__(f"unsupported node: {kind}", node)
        self.kind = kind


class NoTailExpression(CompileError):
    hint = "the last expression of a function body is its return value"

    def __init__(self, function_name, node=None):
        super().__init__(f"function '{function_name}' has no tail expression", node)
        self.function_name = function_name


class UnknownParameterShape(CompileError):
    hint = "parameters must be plain identifiers"

    def __init__(self, index, node=None):
        super().__init__(f"unknown shape for parameter {index}", node)
        self.index = index


class ErrorHandler:
    def __init__(self, source_code: str, filename: str, stream=None):
        self.source_code = source_code
        self.lines = source_code.splitlines()
        self.filename = filename
        self.stream = stream if stream is not None else sys.stderr
        self.had_error = False

    def _emit(self, text=""):
        print(text, file=self.stream)

    def error(self, error: SprigError):
        """
        Reports an error, pointing at its source location when it has one.
        """
        self.had_error = True

        lineno = error.lineno
        col = error.col_offset

        self._emit(f"\n{Colors.RED}{Colors.BOLD}error:{Colors.RESET} {error.message}")

        if 0 < lineno <= len(self.lines):
            line_content = self.lines[lineno - 1]

            self._emit(f"{Colors.BLUE}   -->{Colors.RESET} {self.filename}:{lineno}:{col}")

            line_str = str(lineno)
            padding = " " * len(line_str)

            self._emit(f"{Colors.BLUE} {padding} |{Colors.RESET}")
            self._emit(f"{Colors.BLUE} {line_str} |{Colors.RESET} {line_content.replace(chr(9), ' ')}")

            # Pointer
            pointer_pad = " " * max(col - 1, 0)
            self._emit(f"{Colors.BLUE} {padding} |{Colors.RESET} {pointer_pad}{Colors.RED}{Colors.BOLD}^ here{Colors.RESET}")
        else:
            self._emit(f"{Colors.BLUE}   -->{Colors.RESET} {self.filename}:[Unknown Location]")

        if error.hint:
            self._emit(f"{Colors.CYAN}   = help:{Colors.RESET} {error.hint}")

        partial_ir = getattr(error, "partial_ir", "")
        if partial_ir:
            self._emit(f"{Colors.GRAY}--- partial IR (not usable output) ---{Colors.RESET}")
            self._emit(partial_ir)
