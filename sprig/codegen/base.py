import ctypes

from llvmlite import ir, binding


class LLVMBaseMixin:
    """Owns the module and the target description; knows how to verify, emit and JIT it."""

    def __init__(self, triple=None, opt=None, codemodel=None, is_jit=False, module_name="sprig_module"):
        binding.initialize_native_target()
        binding.initialize_native_asmprinter()
        if triple is not None:
            binding.initialize_all_targets()
            binding.initialize_all_asmprinters()

        self.module = ir.Module(name=module_name)
        self.target_triple = triple or binding.get_default_triple()
        self.target = binding.Target.from_triple(self.target_triple)

        if is_jit:
            self.target_machine = self.target.create_target_machine()
        else:
            self.target_machine = self.target.create_target_machine(
                reloc="static",
                codemodel="default" if not codemodel else codemodel,
                opt=0 if not opt else opt,
            )

        self.data_layout_obj = self.target_machine.target_data
        self.module.triple = self.target_triple
        self.module.data_layout = str(self.data_layout_obj)

        self.engine = None

    def generate_ir(self):
        return str(self.module)

    def verify(self):
        """Parses the textual IR back with LLVM and runs its verifier."""
        llvm_module = binding.parse_assembly(self.generate_ir())
        llvm_module.verify()
        return llvm_module

    def generate_object_code(self, output_filename="output.o"):
        llvm_module = self.verify()
        with open(output_filename, "wb") as f:
            f.write(self.target_machine.emit_object(llvm_module))
        return output_filename

    def create_execution_engine(self):
        llvm_module = self.verify()
        target_machine = binding.Target.from_default_triple().create_target_machine()
        engine = binding.create_mcjit_compiler(llvm_module, target_machine)
        engine.finalize_object()
        engine.run_static_constructors()
        # The engine owns the machine code; keep it alive with the compiler.
        self.engine = engine
        return engine

    def jit_function(self, name, arity=0):
        """Returns a ctypes callable for the i32 function `name`."""
        engine = self.engine or self.create_execution_engine()
        func_ptr = engine.get_function_address(name)
        if not func_ptr:
            raise KeyError(f"No function '{name}' in the JIT-compiled module.")
        prototype = ctypes.CFUNCTYPE(ctypes.c_int32, *([ctypes.c_int32] * arity))
        return prototype(func_ptr)

    def runwithjit(self, entry_function_name="main"):
        return self.jit_function(entry_function_name)()
