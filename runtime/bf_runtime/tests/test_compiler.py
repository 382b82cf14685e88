"""
Test suite for the BF compiler
Verifies bracket matching and jump-target resolution
"""

import random

import pytest

from bf_runtime.compiler import BFCompiler, Instruction, OpCode, compile_tokens
from bf_runtime.errors import (
    BFCompileError, UnmatchedLeftBracket, UnmatchedRightBracket,
    E_UNMATCHED_LEFT_BRACKET, E_UNMATCHED_RIGHT_BRACKET,
)
from bf_runtime.tokenizer import tokenize


def compile_source(source):
    return compile_tokens(tokenize(source))


def random_program(rng, length=60, depth=4):
    """Well-formed program with random nesting"""
    out = []
    open_count = 0
    for _ in range(length):
        choice = rng.random()
        if choice < 0.15 and open_count < depth:
            out.append('[')
            open_count += 1
        elif choice < 0.3 and open_count > 0:
            out.append(']')
            open_count -= 1
        else:
            out.append(rng.choice('<>+-.,'))
    out.append(']' * open_count)
    return ''.join(out)


def check_jumps(instructions):
    """Assert the loop invariants hold for every jump pair"""
    stack = []
    for index, instr in enumerate(instructions):
        if instr.op == OpCode.JUMP_IF_ZERO:
            stack.append(index)
        elif instr.op == OpCode.JUMP:
            open_index = stack.pop()
            assert instr.target == open_index
            assert instructions[open_index].target == index + 1
    assert stack == []


class TestSimpleOps:

    def test_one_instruction_per_token(self):
        instructions = compile_source('><+-.,')
        assert [i.op for i in instructions] == [
            OpCode.RIGHT, OpCode.LEFT, OpCode.INC, OpCode.DEC, OpCode.PRINT, OpCode.READ,
        ]
        assert all(i.target is None for i in instructions)

    def test_raw_count_is_one(self):
        assert Instruction(OpCode.INC).count == 1

    def test_empty_program(self):
        assert compile_source('') == []


class TestJumpResolution:

    def test_empty_loop(self):
        assert compile_source('[]') == [
            Instruction(OpCode.JUMP_IF_ZERO, target=2),
            Instruction(OpCode.JUMP, target=0),
        ]

    def test_loop_with_body(self):
        instructions = compile_source('+[-]')
        assert instructions[1] == Instruction(OpCode.JUMP_IF_ZERO, target=4)
        assert instructions[3] == Instruction(OpCode.JUMP, target=1)

    def test_nested_loops(self):
        instructions = compile_source('[[]]')
        assert [(i.op, i.target) for i in instructions] == [
            (OpCode.JUMP_IF_ZERO, 4),
            (OpCode.JUMP_IF_ZERO, 3),
            (OpCode.JUMP, 1),
            (OpCode.JUMP, 0),
        ]

    def test_sibling_loops(self):
        instructions = compile_source('[][]')
        assert [i.target for i in instructions] == [2, 0, 4, 2]

    def test_hello_world_jumps(self, hello_world):
        check_jumps(compile_source(hello_world))

    @pytest.mark.parametrize("seed", range(20))
    def test_random_well_formed_programs(self, seed):
        source = random_program(random.Random(seed))
        instructions = compile_source(source)
        assert len(instructions) == len(source)
        check_jumps(instructions)


class TestBracketErrors:

    def test_lone_left_bracket(self):
        with pytest.raises(UnmatchedLeftBracket) as exc_info:
            compile_source('[')
        assert exc_info.value.code == E_UNMATCHED_LEFT_BRACKET
        assert exc_info.value.message == "Unmatched left bracket!"

    def test_lone_right_bracket(self):
        with pytest.raises(UnmatchedRightBracket) as exc_info:
            compile_source(']')
        assert exc_info.value.code == E_UNMATCHED_RIGHT_BRACKET
        assert exc_info.value.message == "Unmatched right bracket!"

    def test_right_bracket_reported_before_later_left(self):
        # the stray ']' aborts compilation before the trailing '[' is seen
        with pytest.raises(UnmatchedRightBracket):
            compile_source('+]+[')

    def test_unclosed_outer_loop(self):
        with pytest.raises(UnmatchedLeftBracket):
            compile_source('[[]')

    def test_error_position(self):
        with pytest.raises(BFCompileError) as exc_info:
            compile_source('ab]')
        assert exc_info.value.pos == 2

    def test_left_error_points_at_innermost_open(self):
        with pytest.raises(UnmatchedLeftBracket) as exc_info:
            compile_source('[ [')
        assert exc_info.value.pos == 2

    def test_error_string_includes_code(self):
        with pytest.raises(BFCompileError) as exc_info:
            BFCompiler(tokenize(']')).compile()
        assert str(exc_info.value) == "[E_UNMATCHED_RIGHT_BRACKET] Unmatched right bracket!"
