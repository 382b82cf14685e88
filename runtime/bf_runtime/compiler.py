"""
BF Runtime - Compiler

Single pass over the token stream producing a flat instruction list. Brackets
are matched with an explicit stack: each '[' emits a JUMP_IF_ZERO with a
placeholder target that is back-patched once its ']' is reached.

Resulting layout for `[body]` starting at index i:

    i       JUMP_IF_ZERO -> j + 1
    ...     body
    j       JUMP         -> i
"""

from typing import List, Optional, Tuple
from dataclasses import dataclass
import logging

from .errors import UnmatchedLeftBracket, UnmatchedRightBracket
from .tokenizer import Token, TokenType

logger = logging.getLogger(__name__)


# ============================================================================
# Opcodes
# ============================================================================

class OpCode:
    """Instruction opcode constants"""
    RIGHT = "RIGHT"
    LEFT = "LEFT"
    INC = "INC"
    DEC = "DEC"
    PRINT = "PRINT"
    READ = "READ"
    JUMP_IF_ZERO = "JUMP_IF_ZERO"
    JUMP = "JUMP"


JUMP_OPS = frozenset({OpCode.JUMP_IF_ZERO, OpCode.JUMP})

_SIMPLE_OPS = {
    TokenType.MOVE_RIGHT: OpCode.RIGHT,
    TokenType.MOVE_LEFT: OpCode.LEFT,
    TokenType.INCREMENT: OpCode.INC,
    TokenType.DECREMENT: OpCode.DEC,
    TokenType.OUTPUT: OpCode.PRINT,
    TokenType.INPUT: OpCode.READ,
}


@dataclass
class Instruction:
    """Uncondensed instruction; target is set only on jumps"""
    op: str
    target: Optional[int] = None

    @property
    def count(self) -> int:
        return 1


# ============================================================================
# Compiler
# ============================================================================

class BFCompiler:
    """Compile BF tokens into instructions with resolved jump targets"""

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens

    def compile(self) -> List[Instruction]:
        """
        Compile the token stream.

        Raises:
            UnmatchedRightBracket: a ']' with no open '[' (raised on the spot)
            UnmatchedLeftBracket: a '[' still open at end of input
        """
        instructions: List[Instruction] = []
        # (instruction index, token position) of each pending '['
        brackets: List[Tuple[int, int]] = []

        for token in self.tokens:
            if token.type == TokenType.LOOP_OPEN:
                brackets.append((len(instructions), token.pos))
                instructions.append(Instruction(OpCode.JUMP_IF_ZERO, target=0))
            elif token.type == TokenType.LOOP_CLOSE:
                if not brackets:
                    raise UnmatchedRightBracket(token.pos)
                open_index, _ = brackets.pop()
                instructions.append(Instruction(OpCode.JUMP, target=open_index))
                instructions[open_index].target = len(instructions)
            else:
                instructions.append(Instruction(_SIMPLE_OPS[token.type]))

        if brackets:
            _, pos = brackets[-1]
            raise UnmatchedLeftBracket(pos)

        logger.debug("compiled %d tokens into %d instructions", len(self.tokens), len(instructions))
        return instructions


def compile_tokens(tokens: List[Token]) -> List[Instruction]:
    """Compile tokens (convenience function)"""
    return BFCompiler(tokens).compile()


__all__ = [
    'OpCode',
    'JUMP_OPS',
    'Instruction',
    'BFCompiler',
    'compile_tokens',
]
