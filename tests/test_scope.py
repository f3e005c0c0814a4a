import pytest
from llvmlite import ir

from sprig.semantics.scope import Environment, Scope

I32 = ir.IntType(32)


@pytest.fixture
def module():
    return ir.Module(name="scope_test")


def make_function(module, name, arity, var_arg=False):
    return ir.Function(module, ir.FunctionType(I32, [I32] * arity, var_arg=var_arg), name=name)


def test_function_arity_comes_from_signature(module):
    env = Environment()
    symbol = env.define_function("add", make_function(module, "add", 2))
    assert symbol.arity == 2
    assert env.lookup_function("add") is symbol


def test_internal_functions_are_hidden(module):
    env = Environment()
    env.define_function("printf", make_function(module, "printf", 1, var_arg=True),
                        arity=1, is_variadic=True, is_internal=True)
    assert env.lookup_function("printf") is None
    assert env.lookup_function("printf", include_internal=True).is_variadic


def test_redefining_a_function_replaces_it(module):
    env = Environment()
    env.define_function("f", make_function(module, "f", 1))
    second = env.define_function("f", make_function(module, "f.1", 2))
    assert env.lookup_function("f") is second


def test_unknown_names_resolve_to_none():
    env = Environment()
    assert env.lookup_function("nope") is None
    assert env.lookup_variable("nope") is None


def test_variables_live_in_the_current_function_only():
    env = Environment()
    env.define_variable("x", "outer-slot", I32)
    env.enter_function("f")
    assert env.lookup_variable("x") is None
    env.bind_parameter("x", "param-slot", I32)
    assert env.lookup_variable("x").llvm_value == "param-slot"
    env.exit_function()
    assert env.lookup_variable("x").llvm_value == "outer-slot"


def test_functions_are_visible_from_every_scope(module):
    env = Environment()
    env.enter_function("f")
    env.define_function("g", make_function(module, "g", 0))
    env.exit_function()
    assert env.lookup_function("g") is not None


def test_cannot_leave_the_top_level_scope():
    env = Environment()
    with pytest.raises(RuntimeError):
        env.exit_function()


def test_define_rejects_duplicates_bind_replaces():
    scope = Scope("main")
    scope.define("x", 1, I32)
    with pytest.raises(KeyError):
        scope.define("x", 2, I32)
    scope.bind("x", 3, I32)
    assert scope.resolve("x").llvm_value == 3
    assert "x" in scope


def test_only_function_pointers_are_callable(module):
    env = Environment()
    function = make_function(module, "f", 1)
    callable_info = env.define_variable("g", "slot", function.type)
    plain_info = env.define_variable("n", "slot", I32)
    assert callable_info.is_callable
    assert not plain_info.is_callable
