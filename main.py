import argparse
import logging
import sys

from config import InterpreterConfig, LoopPolicy, from_args
from interpreter import Interpreter, InterpreterError
from lexer import split_statements
from parser import ParserError, parse_program
from session import Session
from trace_table import StreamTracer, TraceFanout, TraceRecorder

logger = logging.getLogger("barebones")


def run_file(filename, config=None, trace_table=False):
    with open(filename, 'r', encoding='utf-8') as f:
        source = f.read()
    return run(source, config, trace_table)


def run(source, config=None, trace_table=False):
    """Run a whole program and print its results. Returns an exit status."""
    config = config or InterpreterConfig()

    try:
        program = parse_program(split_statements(source))
    except ParserError as e:
        print(f"Parser Error: {e}")
        return 1

    recorder = TraceRecorder() if trace_table else None
    tracer = _build_tracer(config, recorder)
    interpreter = Interpreter(config=config, tracer=tracer)
    status = 0
    try:
        interpreter.run(program)
    except InterpreterError as e:
        print(f"Runtime Error at line {interpreter.current_line}: {e}")
        status = 1

    if config.verbose:
        print("final results:")
    for line in interpreter.format_results():
        print(line)

    if recorder is not None:
        print()
        print(recorder.format_trace_text())
    return status


def _build_tracer(config, recorder):
    if config.verbose and recorder is not None:
        return TraceFanout([StreamTracer(show_variables=True), recorder])
    if config.verbose:
        return StreamTracer(show_variables=True)
    return recorder


def repl(config=None, stdin=None):
    """Interactive loop: statements accumulate and run as soon as they can."""
    stdin = stdin or sys.stdin
    config = config or InterpreterConfig()
    tracer = StreamTracer(show_variables=True) if config.verbose else None
    session = Session(config, tracer)

    print("Welcome to the bare bones interpreter!")
    print("To quit at any time, type \"quit;\"")
    print("Enter a command to see immediate input:")
    while True:
        print("\n  >>", end=" ", flush=True)
        line = stdin.readline()
        if not line:
            break
        statements = session.take_statements(line)
        names = [s.strip() for s in statements]
        quitting = 'quit' in names
        if quitting:
            statements = statements[:names.index('quit')]
        try:
            session.execute(statements)
        except ParserError as e:
            print(f"Parser Error: {e}")
        except InterpreterError as e:
            print(f"Runtime Error at line {session.interpreter.current_line}: {e}")
            session.discard_failed()
        else:
            if not config.verbose:
                for result in session.format_results("    "):
                    print(result)
        if quitting:
            break
    print("Thank you for using bare bones interpreter!")


def build_arg_parser():
    parser = argparse.ArgumentParser(
        prog="barebones",
        description="Interpreter for Brookshear's Bare Bones language")
    parser.add_argument("file", nargs="?",
                        help="program file ('-' reads standard input); omit for the REPL")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="print every statement as it is processed")
    parser.add_argument("--trace-table", action="store_true",
                        help="print a trace table after the run")
    parser.add_argument("--max-steps", type=int, default=None,
                        help="abort after this many executed statements")
    parser.add_argument("--loop-policy", choices=[p.value for p in LoopPolicy],
                        default=LoopPolicy.STABLE.value,
                        help="how re-entered while-loops treat the loop stack")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="logging level for interpreter diagnostics")
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    try:
        config = from_args(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 2

    if args.file == '-' or (args.file is None and not sys.stdin.isatty()):
        logger.debug("reading program from standard input")
        return run(sys.stdin.read(), config, args.trace_table)
    if args.file:
        try:
            return run_file(args.file, config, args.trace_table)
        except OSError as e:
            print(f"Error: cannot read {args.file}: {e}")
            return 2
    repl(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
