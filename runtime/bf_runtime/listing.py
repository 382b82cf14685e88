"""
BF Runtime - Instruction Listing

Human-readable dump of a raw or condensed program, one instruction per line:

       0  INC x8
       1  JUMP_IF_ZERO -> 9
       2  RIGHT
"""

from typing import Iterable, List


def format_instruction(instr) -> str:
    if instr.target is not None:
        return f"{instr.op} -> {instr.target}"
    if instr.count > 1:
        return f"{instr.op} x{instr.count}"
    return instr.op


def format_listing(instructions: Iterable) -> str:
    lines: List[str] = []
    for index, instr in enumerate(instructions):
        lines.append(f"{index:6d}  {format_instruction(instr)}")
    return "\n".join(lines)


__all__ = ['format_instruction', 'format_listing']
