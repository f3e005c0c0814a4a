from ..essentials import *


# ---------------------------------------------------------------------------
# <Method name=compile_identifier args=[<Compiler>, <Identifier>]>
# <Description>
# A name evaluates to its slot. Loading happens where the value is consumed.
# </Description>
def compile_identifier(compiler: Compiler, ast: Identifier) -> ir.Value:
    info = compiler.env.lookup_variable(ast.name)
    if info is None:
        raise UndefinedSymbol(ast.name, ast)
    return info.llvm_value


# ---------------------------------------------------------------------------
# <Method name=compile_assignment args=[<Compiler>, <Assignment>]>
# <Description>
# name = expression
# 1. A function literal on the right defines a named function.
# 2. Otherwise the value is stored into the name's slot, which is allocated
#    on first assignment and reused after that.
# The stored value is the result, so assignments chain.
# </Description>
def compile_assignment(compiler: Compiler, ast: Assignment) -> ir.Value:
    if isinstance(ast.value, Function):
        return compiler.compile_function(ast.name, ast.value)

    value = compiler.to_scalar(compiler.compile(ast.value))

    info = compiler.env.lookup_variable(ast.name)
    if info is None:
        slot = compiler.allocate_slot(value.type, ast.name)
        info = compiler.env.define_variable(ast.name, slot, value.type)

    value = compiler.coerce(value, info.value_type)
    compiler.builder.store(value, info.llvm_value)
    return value
