"""
BF Runtime - Run-Length Optimizer

Collapses maximal runs of identical RIGHT/LEFT/INC/DEC instructions into one
counted instruction each. PRINT, READ and jumps are never merged; a run of
them is re-emitted one instruction per occurrence.

Merging shrinks the program, so jump targets recorded against raw indices
would point at the wrong instruction afterwards. The optimizer keeps an index
map (raw index -> condensed index) while condensing and rewrites every target
through it before returning.
"""

from typing import List, Optional, Sequence
from dataclasses import dataclass
import logging

from .compiler import Instruction, JUMP_OPS, OpCode
from .config import DEFAULT_MAX_RUN_LENGTH
from .errors import BFConfigError

logger = logging.getLogger(__name__)


MERGEABLE_OPS = frozenset({OpCode.RIGHT, OpCode.LEFT, OpCode.INC, OpCode.DEC})


@dataclass
class CondensedInstruction:
    """Instruction with a repeat count; target is in condensed indices"""
    op: str
    count: int = 1
    target: Optional[int] = None


class BFOptimizer:
    """Run-length encode an instruction sequence"""

    def __init__(self, max_run_length: int = DEFAULT_MAX_RUN_LENGTH):
        if max_run_length < 1:
            raise BFConfigError(f"max_run_length must be at least 1, got {max_run_length}")
        self.max_run_length = max_run_length
        self.index_map: List[int] = []

    def condense(self, instructions: Sequence[Instruction]) -> List[CondensedInstruction]:
        """Condense instructions and remap jump targets"""
        condensed: List[CondensedInstruction] = []
        # index_map[i] is the condensed index holding raw instruction i;
        # the extra trailing slot maps the end-of-program position.
        index_map: List[int] = [0] * (len(instructions) + 1)

        i = 0
        while i < len(instructions):
            instr = instructions[i]
            if instr.op in MERGEABLE_OPS:
                run = 1
                while (i + run < len(instructions)
                       and instructions[i + run].op == instr.op
                       and run < self.max_run_length):
                    run += 1
                for k in range(i, i + run):
                    index_map[k] = len(condensed)
                condensed.append(CondensedInstruction(instr.op, count=run))
                i += run
            else:
                index_map[i] = len(condensed)
                condensed.append(CondensedInstruction(instr.op, target=instr.target))
                i += 1

        index_map[len(instructions)] = len(condensed)

        for instr in condensed:
            if instr.op in JUMP_OPS:
                instr.target = index_map[instr.target]

        self.index_map = index_map
        if instructions:
            logger.debug(
                "condensed %d instructions into %d (%.1f%%)",
                len(instructions), len(condensed),
                100.0 * len(condensed) / len(instructions),
            )
        return condensed


def condense(instructions: Sequence[Instruction],
             max_run_length: int = DEFAULT_MAX_RUN_LENGTH) -> List[CondensedInstruction]:
    """
    Condense instructions (convenience function)

    Example:
        >>> from bf_runtime.tokenizer import tokenize
        >>> from bf_runtime.compiler import compile_tokens
        >>> [(c.op, c.count) for c in condense(compile_tokens(tokenize('+++>')))]
        [('INC', 3), ('RIGHT', 1)]
    """
    return BFOptimizer(max_run_length).condense(instructions)


__all__ = [
    'MERGEABLE_OPS',
    'CondensedInstruction',
    'BFOptimizer',
    'condense',
]
