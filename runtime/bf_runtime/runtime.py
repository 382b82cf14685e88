"""
BF Runtime - Pipeline Interface

Ties the stages together:

    source -> BFTokenizer -> BFCompiler -> BFOptimizer (optional) -> BFInterpreter

Usage:
    from bf_runtime import BFRuntime

    runtime = BFRuntime()
    runtime.execute('++++++++[>++++++++<-]>+.')   # prints "A"
"""

from typing import IO, List, Optional
import io
import logging

from .compiler import BFCompiler
from .config import RuntimeOptions
from .interpreter import AnyInstruction, BFInterpreter
from .optimizer import BFOptimizer
from .tokenizer import BFTokenizer

logger = logging.getLogger(__name__)


class BFRuntime:
    """Main BF runtime interface"""

    def __init__(self, options: Optional[RuntimeOptions] = None,
                 stdin: Optional[IO] = None, stdout: Optional[IO] = None):
        self.options = (options or RuntimeOptions()).validate()
        self.stdin = stdin
        self.stdout = stdout

    def prepare(self, source: str) -> List[AnyInstruction]:
        """Tokenize, compile and (if enabled) condense source"""
        tokens = BFTokenizer(source).tokenize()
        instructions = BFCompiler(tokens).compile()
        if not self.options.optimize:
            logger.debug("optimizer disabled, keeping %d raw instructions", len(instructions))
            return instructions
        return BFOptimizer(self.options.max_run_length).condense(instructions)

    def execute(self, source: str) -> BFInterpreter:
        """Execute BF source code; compile errors propagate before anything runs"""
        program = self.prepare(source)
        interpreter = BFInterpreter(
            program,
            stdin=self.stdin,
            stdout=self.stdout,
            tape_size=self.options.tape_size,
            encoding=self.options.encoding,
        )
        return interpreter.run()


def execute_bf(source: str, input_data: str = "", optimize: bool = True) -> str:
    """
    Execute BF source code and return its output (convenience function)

    Args:
        source: BF source code
        input_data: text served to ',' instructions line by line
        optimize: condense the program before running

    Example:
        >>> execute_bf('++++++++[>++++++++<-]>+.')
        'A'
        >>> execute_bf(',.,.', input_data='hi')
        'hi'
    """
    stdout = io.StringIO()
    runtime = BFRuntime(RuntimeOptions(optimize=optimize), stdin=io.StringIO(input_data), stdout=stdout)
    runtime.execute(source)
    return stdout.getvalue()


__all__ = [
    'BFRuntime',
    'execute_bf',
]


# ============================================================================
# Demo
# ============================================================================

if __name__ == '__main__':
    HELLO = (
        "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
    )
    print("BF Runtime Demo\n")
    print(f"Hello World (optimized): {execute_bf(HELLO)!r}")
    print(f"Hello World (raw):       {execute_bf(HELLO, optimize=False)!r}")
    print(f"Echo:                    {execute_bf(',.,.,.,.', input_data='echo')!r}")
