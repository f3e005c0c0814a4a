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
# essentials.py : Easy import for the codegen parts
from __future__ import annotations
from typing import Dict, List, Optional, Any, Tuple

# --- LLVM Imports ---
from llvmlite import ir

# --- Internal Imports ---
from sprig.ast2.nodes import *
from sprig.semantics.scope import Environment, FunctionSymbol, SymbolInfo
from .compiletime.errors import *

# The one scalar type and the opaque string type.
I32 = ir.IntType(32)
I8_PTR = ir.IntType(8).as_pointer()


class Compiler:
    """
    Attributes every code generation function can rely on. The concrete
    class is `sprig.codegen.sprig.SprigCompiler`.
    """

    module: ir.Module
    builder: Optional[ir.IRBuilder]
    function: Optional[ir.Function]
    env: Environment
    global_strings: Dict[str, ir.Value]

    def compile(self, ast: Node) -> ir.Value: ...
    def create_global_string(self, val: str) -> ir.Value: ...
    def allocate_slot(self, value_type: ir.Type, name: str) -> ir.AllocaInstr: ...
    def to_scalar(self, value: ir.Value) -> ir.Value: ...
    def coerce(self, value: ir.Value, target_type: ir.Type) -> ir.Value: ...
    def bind_parameters(self, llvm_function: ir.Function, names: List[str]) -> List[ir.AllocaInstr]: ...
    def compile_function(self, name: str, ast: Function) -> ir.Function: ...
    def emit_call(self, name: str, callee: ir.Value, args: List[ir.Value], arity: int,
                  is_variadic: bool = False, node: Optional[Node] = None) -> ir.AllocaInstr: ...
