"""
BF Runtime - Interpreter

Fetch-decode-execute loop over a raw or condensed instruction sequence. The
machine state is an instruction pointer, a Tape and an InputBuffer; it halts
once the pointer runs past the last instruction. There is no step limit: a
loop whose cell never reaches zero runs until the process is stopped.
"""

from typing import IO, List, Optional, Sequence, Union
import logging
import sys

from .compiler import Instruction, OpCode
from .config import DEFAULT_ENCODING, DEFAULT_TAPE_SIZE
from .errors import BFError, E_INVALID_INSTRUCTION
from .input_buffer import InputBuffer
from .optimizer import CondensedInstruction
from .tape import Tape

logger = logging.getLogger(__name__)

AnyInstruction = Union[Instruction, CondensedInstruction]


class BFInterpreter:
    """Execute compiled BF instructions against a fresh tape"""

    def __init__(self, instructions: Sequence[AnyInstruction],
                 stdin: Optional[IO] = None, stdout: Optional[IO] = None,
                 tape_size: int = DEFAULT_TAPE_SIZE, encoding: str = DEFAULT_ENCODING):
        self.instructions: List[AnyInstruction] = list(instructions)
        self.tape = Tape(tape_size)
        self.input_buffer = InputBuffer(stdin, encoding=encoding)
        self._stdout = stdout
        self.ip = 0
        self.steps = 0

    @property
    def stdout(self) -> IO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def halted(self) -> bool:
        return self.ip >= len(self.instructions)

    def step(self):
        """Execute the instruction at the pointer"""
        instr = self.instructions[self.ip]
        op = instr.op
        self.steps += 1

        if op == OpCode.RIGHT:
            self.tape.move_right_by(instr.count)
        elif op == OpCode.LEFT:
            self.tape.move_left_by(instr.count)
        elif op == OpCode.INC:
            self.tape.increment(instr.count)
        elif op == OpCode.DEC:
            self.tape.decrement(instr.count)
        elif op == OpCode.PRINT:
            self.stdout.write(chr(self.tape.current) * instr.count)
        elif op == OpCode.READ:
            for _ in range(instr.count):
                self.tape.current = self.input_buffer.pop()
        elif op == OpCode.JUMP_IF_ZERO:
            if self.tape.current == 0:
                self.ip = instr.target
                return
        elif op == OpCode.JUMP:
            self.ip = instr.target
            return
        else:
            raise BFError(E_INVALID_INSTRUCTION, f"Unknown opcode {op!r} at {self.ip}")

        self.ip += 1

    def run(self) -> "BFInterpreter":
        """Run until the pointer leaves the program"""
        logger.debug("running %d instructions", len(self.instructions))
        try:
            while self.ip < len(self.instructions):
                self.step()
        finally:
            self.stdout.flush()
        logger.debug("halted after %d steps", self.steps)
        return self


def interpret(instructions: Sequence[AnyInstruction],
              stdin: Optional[IO] = None, stdout: Optional[IO] = None) -> BFInterpreter:
    """Run instructions against the given streams (convenience function)"""
    return BFInterpreter(instructions, stdin=stdin, stdout=stdout).run()


__all__ = [
    'BFInterpreter',
    'interpret',
]
