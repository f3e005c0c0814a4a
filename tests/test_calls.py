import pytest
from llvmlite import ir

from sprig.ast2.nodes import Assignment, Call, Identifier, Integer, StringLiteral
from sprig.codegen.compiletime.errors import ArityMismatch, InvalidCallTarget, UndefinedSymbol
from sprig.utils.helpers import parse_code

from .irutil import allocas_named, instructions

ADD = "add = (a, b) { + (a, b) }"


def main_of(compiler):
    return compiler.module.get_global("main")


def test_user_function_adds(compile_text):
    compiled = compile_text(ADD + "; add(2, 3)")
    assert compiled.jit_function("add", 2)(2, 3) == 5


def test_call_result_is_usable_as_a_value(compile_text):
    compiled = compile_text(ADD + "; five = () { add(2, 3) }")
    assert compiled.jit_function("five")() == 5


def test_program_runs_to_a_zero_status(compile_text):
    compiled = compile_text(ADD + "; x = add(2, 3); y = x + x")
    assert compiled.runwithjit("main") == 0


@pytest.mark.parametrize("args", [[Integer(1)], [Integer(1), Integer(2), Integer(3)]])
def test_wrong_argument_count(compile_nodes, args):
    nodes = parse_code(ADD) + [Call("add", args)]
    with pytest.raises(ArityMismatch) as excinfo:
        compile_nodes(nodes)
    error = excinfo.value
    assert (error.name, error.expected, error.actual) == ("add", 2, len(args))


@pytest.mark.parametrize("argument", [Integer(1), StringLiteral("s"), Identifier("x"), Call("+", [Integer(1), Integer(2)])])
def test_print_takes_any_single_argument(compile_nodes, argument):
    compiled = compile_nodes([Assignment("x", Integer(4)), Call("print", [argument])])
    compiled.verify()


def test_print_with_two_arguments(compile_nodes):
    with pytest.raises(ArityMismatch) as excinfo:
        compile_nodes([Call("print", [Integer(1), Integer(2)])])
    assert (excinfo.value.expected, excinfo.value.actual) == (1, 2)


def test_printf_is_not_callable_by_name(compile_nodes):
    with pytest.raises(UndefinedSymbol) as excinfo:
        compile_nodes([Call("printf", [StringLiteral("hi")])])
    assert excinfo.value.name == "printf"


def test_missing_function(compile_nodes):
    with pytest.raises(UndefinedSymbol) as excinfo:
        compile_nodes([Call("missing", [])])
    assert excinfo.value.name == "missing"


def test_arguments_are_lowered_before_the_callee_is_resolved(compile_nodes):
    with pytest.raises(UndefinedSymbol) as excinfo:
        compile_nodes([Call("missing", [Identifier("y")])])
    assert excinfo.value.name == "y"


def test_plain_variable_is_not_callable(compile_nodes):
    with pytest.raises(InvalidCallTarget) as excinfo:
        compile_nodes([Assignment("x", Integer(1)), Call("x", [])])
    assert excinfo.value.name == "x"


def test_variable_holding_a_function_is_callable(compile_text):
    compiled = compile_text("g = inc = (x) { + (x, 1) }; y = g(41)")
    main = main_of(compiled)
    calls = instructions(main, ir.CallInstr)
    assert len(calls) == 1
    assert isinstance(calls[0].callee, ir.LoadInstr)
    compiled.verify()


def test_arity_is_checked_through_variables(compile_text):
    with pytest.raises(ArityMismatch) as excinfo:
        compile_text("g = inc = (x) { + (x, 1) }; g(1, 2)")
    assert (excinfo.value.name, excinfo.value.expected, excinfo.value.actual) == ("g", 1, 2)


def test_slot_arguments_are_loaded_once(compile_nodes):
    compiled = compile_nodes([Assignment("x", Integer(5)), Call("print", [Identifier("x")])])
    main = main_of(compiled)
    [slot] = allocas_named(main, "x")
    loads = [l for l in instructions(main, ir.LoadInstr) if l.operands[0] is slot]
    assert len(loads) == 1
    [call] = instructions(main, ir.CallInstr)
    assert call.args[0] is loads[0]


def test_immediates_are_passed_directly(compile_nodes):
    compiled = compile_nodes([Call("+", [Integer(1), Integer(2)])])
    [call] = instructions(main_of(compiled), ir.CallInstr)
    assert [str(a) for a in call.args] == ["i32 1", "i32 2"]


def test_call_result_goes_into_a_fresh_slot(compile_nodes):
    compiled = compile_nodes([Call("+", [Integer(1), Integer(2)]), Call("+", [Integer(3), Integer(4)])])
    main = main_of(compiled)
    slots = [a for a in instructions(main, ir.AllocaInstr) if a.name.startswith("+")]
    assert len(slots) == 2
    assert compiled.builder.block is main.blocks[0]


def test_string_argument_is_converted_at_the_boundary(compile_nodes):
    compiled = compile_nodes([Call("+", [StringLiteral("s"), Integer(1)])])
    assert "ptrtoint" in compiled.generate_ir()
    compiled.verify()
