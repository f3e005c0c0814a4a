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
""" Sprig Compiler - Code Generation Module """
from .base import LLVMBaseMixin
from .essentials import *
from .lib.intrinsics import IntrinsicLibrary

# --- Production
from .prod.literals import compile_integer, compile_string
from .prod.vars import compile_identifier, compile_assignment
from .prod.calls import compile_call, emit_call
from .prod.funcs import compile_function

# -------------------------------------------
# Compiler Components Import
from .helpers import create_global_string, allocate_slot, to_scalar, coerce, bind_parameters
# -------------------------------------------


class SprigCompiler(LLVMBaseMixin):
    # =========================================================================
    # CORE METHODS (Signatures)
    # =========================================================================

    # --- Value Helpers (sprig/codegen/helpers.py) ---
    create_global_string = create_global_string
    allocate_slot = allocate_slot
    to_scalar = to_scalar
    coerce = coerce
    bind_parameters = bind_parameters

    # --- Function Helpers (sprig/codegen/prod) ---
    compile_function = compile_function
    compile_call = compile_call
    compile_assignment = compile_assignment
    emit_call = emit_call

    def __init__(self, triple=None, opt=None, codemodel=None, is_jit=False, module_name="sprig_module"):
        super().__init__(triple=triple, opt=opt, codemodel=codemodel, is_jit=is_jit, module_name=module_name)

        self.builder: Optional[ir.IRBuilder] = None  # Moves between functions while compiling
        self.function: Optional[ir.Function] = None
        self.main_function: Optional[ir.Function] = None

        # ---------------- Symbols ------------------
        self.env = Environment()
        # ---------- Strings -------------
        self.global_strings: Dict[str, ir.Value] = {}

        self.intrinsics_lib = IntrinsicLibrary(self)

    def compile(self, ast):
        """Lowers one node (or a list of nodes, in order) and returns its value."""
        # Literals
        if isinstance(ast, Integer):
            return compile_integer(self, ast)
        elif isinstance(ast, StringLiteral):
            return compile_string(self, ast)
        # Names
        elif isinstance(ast, Identifier):
            return compile_identifier(self, ast)
        elif isinstance(ast, Assignment):
            return compile_assignment(self, ast)
        # Functions
        elif isinstance(ast, Call):
            return compile_call(self, ast)
        elif isinstance(ast, Function):
            raise UnassignedFunction(ast)
        # Parser leftovers
        elif isinstance(ast, (Partial, Empty)):
            raise UnsupportedNode(ast.kind, ast)
        elif isinstance(ast, list):
            value = None
            for node in ast:
                value = self.compile(node)
            return value
        else:
            raise UnsupportedNode(type(ast).__name__, ast)

    def compile_program(self, nodes: List[Node]) -> str:
        """
        Compiles a whole program: the intrinsics, then every top-level
        expression, in order, inside an implicit `main` that returns 0.

        On failure the raised CompileError carries the IR built so far in
        `partial_ir`. That text is for debugging only.
        """
        if self.main_function is not None:
            raise RuntimeError("A SprigCompiler compiles exactly one program.")

        try:
            self.intrinsics_lib.register_all()

            main_ty = ir.FunctionType(I32, [])
            self.main_function = ir.Function(self.module, main_ty, name="main")
            self.function = self.main_function
            self.builder = ir.IRBuilder(self.main_function.append_basic_block(name="entry"))

            self.compile(list(nodes))

            self.builder.ret(ir.Constant(I32, 0))
        except CompileError as error:
            error.partial_ir = self.generate_ir()
            raise

        return self.generate_ir()


def compile_program(nodes: List[Node], **options) -> str:
    """Compiles top-level nodes with a fresh compiler and returns the IR text."""
    return SprigCompiler(**options).compile_program(nodes)
