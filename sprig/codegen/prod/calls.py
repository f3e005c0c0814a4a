from ..essentials import *


# ---------------------------------------------------------------------------
# <Method name=compile_call args=[<Compiler>, <Call>]>
# <Description>
# name(args...)
# Arguments are lowered first, left to right. The callee is then looked up:
# 1. the function table (intrinsics and named functions),
# 2. a variable holding a function pointer.
# </Description>
def compile_call(compiler: Compiler, ast: Call) -> ir.AllocaInstr:
    args = [compiler.compile(arg) for arg in ast.args]

    symbol = compiler.env.lookup_function(ast.name)
    if symbol is not None:
        return compiler.emit_call(
            ast.name, symbol.llvm_function, args, symbol.arity, symbol.is_variadic, node=ast
        )

    info = compiler.env.lookup_variable(ast.name)
    if info is None:
        raise UndefinedSymbol(ast.name, ast)
    if not info.is_callable:
        raise InvalidCallTarget(ast.name, ast)

    function_type = info.value_type.pointee
    check_arity(ast.name, len(function_type.args), function_type.var_arg, len(args), ast)
    callee = compiler.builder.load(info.llvm_value, name=ast.name + "_fn")
    return compiler.emit_call(
        ast.name, callee, args, len(function_type.args), function_type.var_arg, node=ast
    )


def check_arity(name: str, arity: int, is_variadic: bool, actual: int, node: Optional[Node] = None):
    if is_variadic:
        if actual < arity:
            raise ArityMismatch(name, arity, actual, node)
    elif actual != arity:
        raise ArityMismatch(name, arity, actual, node)


# ---------------------------------------------------------------------------
# <Method name=emit_call args=[<Compiler>, <str>, <ir.Value>, <List[ir.Value]>, <int>, <bool>]>
# <Description>
# The calling convention, shared by user calls and intrinsics:
# 1. every argument is brought to scalar form (slots are loaded exactly once),
# 2. fixed parameters are converted to the declared parameter type,
# 3. the single result is stored into a fresh slot named after the callee.
# The builder's insertion point is left where it was.
# </Description>
def emit_call(compiler: Compiler, name: str, callee: ir.Value, args: List[ir.Value], arity: int,
              is_variadic: bool = False, node: Optional[Node] = None) -> ir.AllocaInstr:
    check_arity(name, arity, is_variadic, len(args), node)

    param_types = callee.function_type.args
    call_args = []
    for index, value in enumerate(args):
        value = compiler.to_scalar(value)
        if index < len(param_types):
            value = compiler.coerce(value, param_types[index])
        call_args.append(value)

    result = compiler.builder.call(callee, call_args, name="call")
    slot = compiler.allocate_slot(result.type, name)
    compiler.builder.store(result, slot)
    return slot
