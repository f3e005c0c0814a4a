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
# Expression tree produced by the parser and consumed by the code generator.
class Node:
    lineno: int = 0
    lexpos: int = 0
    col_offset: int = 0

    def at(self, p, index=1):
        """
        Helper to attach location info from PLY slice.
        Usage in parser: p[0] = MyNode(...).at(p, 1)
        """
        self.lineno = p.lineno(index)
        self.lexpos = p.lexpos(index)
        source = p.lexer.lexdata
        self.col_offset = self.lexpos - source.rfind("\n", 0, self.lexpos)
        return self

    def located(self, other):
        """Copies the source position of another node."""
        self.lineno = other.lineno
        self.lexpos = other.lexpos
        self.col_offset = other.col_offset
        return self

    @property
    def kind(self):
        return type(self).__name__


# Literals & Names
class Integer(Node):
    def __init__(self, value):
        self.value = value

    def __repr__(self):
        return f"Integer({self.value})"


class Identifier(Node):
    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"Identifier({self.name})"


class StringLiteral(Node):
    def __init__(self, text):
        self.text = text

    def __repr__(self):
        return f"StringLiteral({self.text!r})"


# Expressions
class Assignment(Node):
    def __init__(self, name, value):
        self.name = name
        self.value = value

    def __repr__(self):
        return f"Assignment(ID: {self.name}, Value: {self.value})"


class Call(Node):
    def __init__(self, name, args):
        self.name = name
        self.args = args

    def __repr__(self):
        return f"Call(Name: {self.name}, Args: {self.args})"


class Function(Node):
    def __init__(self, params, body):
        self.params = params
        self.body = body

    def __repr__(self):
        return f"Function(Params: {self.params}, Body: {self.body})"


# Parser-only
class Partial(Node):
    """An infix call still waiting for its left operand."""

    def __init__(self, name, right):
        self.name = name
        self.right = right

    def __repr__(self):
        return f"Partial(Name: {self.name}, Right: {self.right})"


class Empty(Node):
    def __repr__(self):
        return "Empty()"


NODE_KINDS = (Integer, Identifier, StringLiteral, Assignment, Call, Function, Partial, Empty)
