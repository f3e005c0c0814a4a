from llvmlite import ir

from ..essentials import I32, I8_PTR

PRINT_FORMAT = "%d\n"


class IntrinsicLibrary:
    """
    Functions the compiler provides before any user code is seen:

    * ``printf`` - the C output primitive, declared only. Internal: user code
      cannot call it by name.
    * ``print``  - prints one integer followed by a newline, returns printf's result.
    * ``+``      - integer sum of its two arguments.
    """

    def __init__(self, compiler):
        self.compiler = compiler
        self.registered = False

    def register_all(self):
        if self.registered:
            return
        self.declare_printf()
        self.define_print()
        self.define_add()
        self.registered = True

    # --- Helpers ---
    def _define(self, name, param_names, body):
        """Builds `name` with one i32 slot per parameter and returns what `body` yields."""
        compiler = self.compiler
        llvm_function = ir.Function(
            compiler.module, ir.FunctionType(I32, [I32] * len(param_names)), name=name
        )
        compiler.env.define_function(name, llvm_function)

        prev_function = compiler.function
        prev_builder = compiler.builder
        compiler.env.enter_function(name)
        try:
            compiler.function = llvm_function
            compiler.builder = ir.IRBuilder(llvm_function.append_basic_block(name="entry"))
            slots = compiler.bind_parameters(llvm_function, param_names)
            compiler.builder.ret(body(slots))
        finally:
            compiler.env.exit_function()
            compiler.function = prev_function
            compiler.builder = prev_builder
        return llvm_function

    # --- Intrinsics ---
    def declare_printf(self):
        compiler = self.compiler
        printf_ty = ir.FunctionType(I32, [I8_PTR], var_arg=True)
        printf = ir.Function(compiler.module, printf_ty, name="printf")
        compiler.env.define_function("printf", printf, arity=1, is_variadic=True, is_internal=True)
        return printf

    def define_print(self):
        compiler = self.compiler
        printf = compiler.env.lookup_function("printf", include_internal=True)

        def body(slots):
            fmt = compiler.create_global_string(PRINT_FORMAT)
            result = compiler.emit_call(
                "printf", printf.llvm_function, [fmt, slots[0]], printf.arity, printf.is_variadic
            )
            return compiler.to_scalar(result)

        return self._define("print", ["value"], body)

    def define_add(self):
        compiler = self.compiler

        def body(slots):
            a = compiler.to_scalar(slots[0])
            b = compiler.to_scalar(slots[1])
            return compiler.builder.add(a, b, name="add")

        return self._define("+", ["a", "b"], body)
