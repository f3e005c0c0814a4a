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
from .essentials import *


# ---------------------------------------------------------------------------
# <Method name=create_global_string args=[<Compiler>, <str>]>
# <Description>
# Interns a string literal as a global constant in the LLVM module.
# 1. Checks the cache to avoid duplicating identical strings.
# 2. Creates a global array constant [N x i8] with the string data + null terminator.
# 3. Returns a pointer (i8*) to the start of the array using a Constant GEP.
# Names come from the module's name scope (.str, .str.1, ...), so the same
# program always produces the same IR.
# </Description>
def create_global_string(compiler: Compiler, val: str) -> ir.Value:
    # 1. Check Cache
    if val in compiler.global_strings:
        return compiler.global_strings[val]

    # 2. Encode String
    bytes_ = bytearray(val.encode("utf8")) + b"\00"
    str_ty = ir.ArrayType(ir.IntType(8), len(bytes_))

    # 3. Create Global Variable
    name = compiler.module.get_unique_name(".str")
    gvar = ir.GlobalVariable(compiler.module, str_ty, name=name)
    gvar.linkage = "internal"
    gvar.global_constant = True
    gvar.initializer = ir.Constant(str_ty, bytes_)

    # 4. Create Pointer (i8*)
    # Constant expression GEP, usable without an active builder.
    zero = ir.Constant(ir.IntType(32), 0)
    str_ptr = gvar.gep([zero, zero])

    # 5. Cache and Return
    compiler.global_strings[val] = str_ptr
    return str_ptr


# ---------------------------------------------------------------------------
# <Method name=allocate_slot args=[<Compiler>, <ir.Type>, <str>]>
# <Description>
# Reserves stack storage for one value in the current function.
# </Description>
def allocate_slot(compiler: Compiler, value_type: ir.Type, name: str) -> ir.AllocaInstr:
    return compiler.builder.alloca(value_type, name=name)


def is_slot(value: ir.Value) -> bool:
    return isinstance(value, ir.AllocaInstr)


# ---------------------------------------------------------------------------
# <Method name=to_scalar args=[<Compiler>, <ir.Value>]>
# <Description>
# Brings a lowered value into the form that is passed around: slots are
# loaded once, immediates and string addresses are already scalar.
# </Description>
def to_scalar(compiler: Compiler, value: ir.Value) -> ir.Value:
    if is_slot(value):
        return compiler.builder.load(value, name=value.name + "_val")
    return value


# ---------------------------------------------------------------------------
# <Method name=coerce args=[<Compiler>, <ir.Value>, <ir.Type>]>
# <Description>
# Converts a scalar to the type a parameter, slot or return expects.
# Strings are opaque addresses, so int <-> pointer is a plain reinterpretation.
# </Description>
def coerce(compiler: Compiler, value: ir.Value, target_type: ir.Type) -> ir.Value:
    source_type = value.type
    if source_type == target_type:
        return value

    if isinstance(target_type, ir.IntType) and isinstance(source_type, ir.PointerType):
        return compiler.builder.ptrtoint(value, target_type)
    if isinstance(target_type, ir.PointerType) and isinstance(source_type, ir.IntType):
        return compiler.builder.inttoptr(value, target_type)
    if isinstance(target_type, ir.PointerType) and isinstance(source_type, ir.PointerType):
        return compiler.builder.bitcast(value, target_type)
    if isinstance(target_type, ir.IntType) and isinstance(source_type, ir.IntType):
        if source_type.width > target_type.width:
            return compiler.builder.trunc(value, target_type)
        return compiler.builder.sext(value, target_type)

    raise TypeError(f"Cannot convert {source_type} to {target_type}")


# ---------------------------------------------------------------------------
# <Method name=bind_parameters args=[<Compiler>, <ir.Function>, <List[str]>]>
# <Description>
# Gives every incoming argument its own slot in the current scope.
# Must run with the builder positioned in the function's entry block.
# </Description>
def bind_parameters(compiler: Compiler, llvm_function: ir.Function, names: List[str]) -> List[ir.AllocaInstr]:
    slots = []
    for llvm_arg, name in zip(llvm_function.args, names):
        llvm_arg.name = name
        slot = compiler.allocate_slot(llvm_arg.type, name)
        compiler.builder.store(llvm_arg, slot)
        compiler.env.bind_parameter(name, slot, llvm_arg.type)
        slots.append(slot)
    return slots
