from llvmlite import ir


class SymbolInfo:
    """A variable: the slot it lives in and the LLVM type of the value it holds."""

    def __init__(self, llvm_value, value_type):
        self.llvm_value = llvm_value
        self.value_type = value_type

    @property
    def is_callable(self):
        return isinstance(self.value_type, ir.PointerType) and isinstance(
            getattr(self.value_type, "pointee", None), ir.FunctionType
        )


class FunctionSymbol:
    def __init__(self, name, llvm_function, arity, is_variadic=False, is_internal=False):
        self.name = name
        self.llvm_function = llvm_function
        self.arity = arity
        self.is_variadic = is_variadic
        # Internal functions are only reachable from other intrinsics.
        self.is_internal = is_internal

    def __repr__(self):
        suffix = ", ..." if self.is_variadic else ""
        return f"FunctionSymbol({self.name}/{self.arity}{suffix})"


class Scope:
    """One flat variable namespace: the locals of one function."""

    def __init__(self, function_name=None):
        self.function_name = function_name
        self.symbols = {}  # Maps name -> SymbolInfo

    def define(self, name, llvm_value, value_type):
        if name in self.symbols:
            raise KeyError(f"Symbol '{name}' already defined in this scope.")
        self.symbols[name] = SymbolInfo(llvm_value, value_type)
        return self.symbols[name]

    def bind(self, name, llvm_value, value_type):
        """Like define, but a later binding of the same name replaces the earlier one."""
        self.symbols[name] = SymbolInfo(llvm_value, value_type)
        return self.symbols[name]

    def resolve(self, name):
        return self.symbols.get(name)

    def __contains__(self, name):
        return name in self.symbols


class Environment:
    """
    Symbol tables for one compilation.

    Functions live in a single table visible from everywhere once registered.
    Variables live in a stack of scopes, one per function being lowered; only
    the innermost scope is visible, since a slot belongs to the function that
    allocated it.
    """

    def __init__(self):
        self.functions = {}  # Maps name -> FunctionSymbol
        self.global_scope = Scope(function_name="main")
        self.scopes = [self.global_scope]

    @property
    def current_scope(self):
        return self.scopes[-1]

    # --- Functions ---
    def define_function(self, name, llvm_function, arity=None, is_variadic=False, is_internal=False):
        if arity is None:
            arity = len(llvm_function.function_type.args)
        symbol = FunctionSymbol(name, llvm_function, arity, is_variadic, is_internal)
        self.functions[name] = symbol
        return symbol

    def lookup_function(self, name, include_internal=False):
        symbol = self.functions.get(name)
        if symbol is None or (symbol.is_internal and not include_internal):
            return None
        return symbol

    # --- Variables ---
    def define_variable(self, name, slot, value_type):
        return self.current_scope.define(name, slot, value_type)

    def bind_parameter(self, name, slot, value_type):
        return self.current_scope.bind(name, slot, value_type)

    def lookup_variable(self, name):
        return self.current_scope.resolve(name)

    # --- Function scopes ---
    def enter_function(self, name):
        self.scopes.append(Scope(function_name=name))

    def exit_function(self):
        if len(self.scopes) == 1:
            raise RuntimeError("Attempting to exit the top-level scope.")
        self.scopes.pop()
