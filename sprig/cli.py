import argparse
import sys
from pathlib import Path

from .codegen.compiletime.errors import ErrorHandler, SprigError
from .codegen.sprig import SprigCompiler
from .lexer.lexer import tokenize
from .utils.helpers import parse_code, flush_c_stdout

argparser = argparse.ArgumentParser(prog="sprig", description="Compile Sprig expressions to LLVM IR.")
argparser.add_argument("file", nargs="?", help="source file; standard input when omitted")
argparser.add_argument("-o", "--output", help="also write the IR to this file")
argparser.add_argument("--tokens", action="store_true", help="print the token stream")
argparser.add_argument("--ast", action="store_true", help="print the parsed expressions")
argparser.add_argument("-q", "--quiet", action="store_true", help="do not print the IR")
argparser.add_argument("--verify", action="store_true", help="run the LLVM verifier on the result")
argparser.add_argument("--run", action="store_true", help="JIT-compile and run main")
argparser.add_argument("--emit-obj", metavar="PATH", help="write a native object file")
argparser.add_argument("--triple", help="target triple (default: host)")


def read_source(args):
    if args.file:
        path = Path(args.file)
        if not path.is_file():
            raise FileNotFoundError(f"no such file: {args.file}")
        return path.read_text(encoding="utf-8"), args.file
    if sys.stdin.isatty():
        print("Enter source code, Ctrl+D to parse.", file=sys.stderr)
    return sys.stdin.read(), "<stdin>"


def runOn(args):
    try:
        source, filename = read_source(args)
    except FileNotFoundError as e:
        print(f"sprig: {e}", file=sys.stderr)
        return 2

    errors = ErrorHandler(source, filename)
    compiler = None
    try:
        if args.tokens:
            for token in tokenize(source):
                print(f"lexer: {token.type} {token.value!r}")

        ast = parse_code(source, filename)
        if args.ast:
            for expression in ast:
                print(f"parser: {expression}")

        compiler = SprigCompiler(triple=args.triple)
        ir_text = compiler.compile_program(ast)
    except SprigError as e:
        errors.error(e)
        return 1

    if not args.quiet:
        print(ir_text)
    if args.output:
        Path(args.output).write_text(ir_text, encoding="utf-8")
    if args.verify:
        compiler.verify()
    if args.emit_obj:
        compiler.generate_object_code(args.emit_obj)
    if args.run:
        status = compiler.runwithjit("main")
        flush_c_stdout()
        return status
    return 0


def main(argv=None):
    args = argparser.parse_args(argv)
    return runOn(args)


if __name__ == "__main__":
    sys.exit(main())
