import pytest
from llvmlite import ir

from sprig.codegen.lib.intrinsics import IntrinsicLibrary

from .irutil import instructions


@pytest.fixture
def compiled(compile_nodes):
    return compile_nodes([])


def test_intrinsics_come_before_main(compiled):
    names = [f.name for f in compiled.module.functions]
    assert names[:4] == ["printf", "print", "+", "main"]


def test_printf_is_a_variadic_declaration(compiled):
    printf = compiled.module.get_global("printf")
    assert printf.is_declaration
    assert printf.function_type.var_arg
    symbol = compiled.env.lookup_function("printf", include_internal=True)
    assert symbol.is_internal and symbol.is_variadic


def test_user_code_cannot_see_printf(compiled):
    assert compiled.env.lookup_function("printf") is None


def test_print_and_add_signatures(compiled):
    assert compiled.env.lookup_function("print").arity == 1
    assert compiled.env.lookup_function("+").arity == 2


def test_print_uses_the_integer_format(compiled):
    text = compiled.generate_ir()
    assert 'c"%d\\0a\\00"' in text
    [call] = instructions(compiled.module.get_global("print"), ir.CallInstr)
    assert call.callee.name == "printf"



def test_intrinsics_are_valid_llvm(compiled):
    compiled.verify()


def test_add_adds(compiled):
    add = compiled.jit_function("+", 2)
    assert add(2, 3) == 5
    assert add(-4, 1) == -3


def test_registration_happens_once(compiler):
    library = IntrinsicLibrary(compiler)
    library.register_all()
    library.register_all()
    assert [f.name for f in compiler.module.functions] == ["printf", "print", "+"]
