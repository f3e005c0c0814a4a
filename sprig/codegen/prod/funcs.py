from ..essentials import *


# ---------------------------------------------------------------------------
# <Method name=compile_function args=[<Compiler>, <str>, <Function>]>
# <Description>
# Compiles `name = (params) { body }` into a new top-level function.
# 1. Signature: one i32 per parameter, i32 result.
# 2. The function is registered before its body is compiled, so the body
#    can call it recursively.
# 3. Parameters get their own slots in a fresh scope; the caller's scope,
#    function and builder come back afterwards, even on error.
# 4. The value of the last body expression is returned.
# </Description>
def compile_function(compiler: Compiler, name: str, ast: Function) -> ir.Function:
    param_names = []
    for index, param in enumerate(ast.params):
        if not isinstance(param, Identifier):
            raise UnknownParameterShape(index, param)
        param_names.append(param.name)

    llvm_func_type = ir.FunctionType(I32, [I32] * len(param_names))
    # Redefining a name rebinds it to a fresh symbol (f, f.1, ...).
    llvm_name = compiler.module.get_unique_name(name)
    llvm_function = ir.Function(compiler.module, llvm_func_type, name=llvm_name)
    compiler.env.define_function(name, llvm_function)

    prev_function = compiler.function
    prev_builder = compiler.builder
    compiler.env.enter_function(name)
    try:
        compiler.function = llvm_function
        entry_block = llvm_function.append_basic_block(name="entry")
        compiler.builder = ir.IRBuilder(entry_block)

        compiler.bind_parameters(llvm_function, param_names)

        if not ast.body:
            raise NoTailExpression(name, ast)

        tail = None
        for expression in ast.body:
            tail = compiler.compile(expression)

        compiler.builder.ret(compiler.coerce(compiler.to_scalar(tail), I32))
    finally:
        compiler.env.exit_function()
        compiler.function = prev_function
        compiler.builder = prev_builder

    return llvm_function
