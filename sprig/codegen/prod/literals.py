from ..essentials import *


# ---------------------------------------------------------------------------
# <Method name=compile_integer args=[<Compiler>, <Integer>]>
# <Description>
# Integers are immediates; they only get a slot once assigned to a name.
# </Description>
def compile_integer(compiler: Compiler, ast: Integer) -> ir.Constant:
    return ir.Constant(I32, ast.value)


# ---------------------------------------------------------------------------
# <Method name=compile_string args=[<Compiler>, <StringLiteral>]>
# <Description>
# Interns the literal and yields its i8* address. Only the `\n` escape exists.
# </Description>
def compile_string(compiler: Compiler, ast: StringLiteral) -> ir.Value:
    return compiler.create_global_string(ast.text.replace("\\n", "\n"))
