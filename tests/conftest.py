import pytest

from sprig.codegen.sprig import SprigCompiler
from sprig.utils.helpers import parse_code


@pytest.fixture
def compiler():
    return SprigCompiler()


@pytest.fixture
def compile_nodes():
    """Compiles nodes with a fresh compiler and hands the compiler back for inspection."""

    def _compile(nodes):
        compiler = SprigCompiler()
        compiler.compile_program(nodes)
        return compiler

    return _compile


@pytest.fixture
def compile_text(compile_nodes):
    def _compile(source):
        return compile_nodes(parse_code(source))

    return _compile
