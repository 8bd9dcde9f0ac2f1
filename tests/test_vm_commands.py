# =============================================================================
# test_vm_commands.py - VM Command Snapshot Unit Tests
# =============================================================================
# Tests for command classification and operand extraction on single
# instructions, independent of the parser cursor.
#
# Test coverage includes:
#   - Keyword table
#   - Classification of every keyword, case sensitivity, unknown keywords
#   - arg1 / arg2 per command type
#   - Misuse of operand accessors
#   - Malformed numeric operands
# =============================================================================

import dataclasses

import pytest

from hack_toolchain.errors import (
    InvalidOperandAccessError,
    MalformedCommandError,
    VMParseError,
)
from hack_toolchain.vm import (
    ARG2_COMMANDS,
    ARITHMETIC_OPERATORS,
    KEYWORDS,
    Command,
    CommandType,
    classify,
)


# =============================================================================
# Keyword Table Tests
# =============================================================================

class TestKeywordTable:
    """KEYWORDS maps every VM keyword to its command type."""

    def test_all_keywords_present(self):
        assert set(KEYWORDS) == ARITHMETIC_OPERATORS | {
            "push", "pop", "label", "goto", "if-goto", "function", "call", "return",
        }

    def test_every_command_type_reachable(self):
        assert set(KEYWORDS.values()) == set(CommandType)

    def test_arg2_commands(self):
        assert ARG2_COMMANDS == {
            CommandType.PUSH, CommandType.POP, CommandType.FUNCTION, CommandType.CALL,
        }

    def test_classify(self):
        assert classify("if-goto") is CommandType.IF
        assert classify("PUSH") is None
        assert classify("") is None


# =============================================================================
# Classification Tests
# =============================================================================

class TestClassification:
    """Command.type classifies by the first token."""

    @pytest.mark.parametrize("op", sorted(ARITHMETIC_OPERATORS))
    def test_arithmetic(self, op):
        assert Command(op).type is CommandType.ARITHMETIC

    @pytest.mark.parametrize("text,expected", [
        ("push constant 7", CommandType.PUSH),
        ("pop local 0", CommandType.POP),
        ("label LOOP", CommandType.LABEL),
        ("goto LOOP", CommandType.GOTO),
        ("if-goto LOOP", CommandType.IF),
        ("function Main.main 2", CommandType.FUNCTION),
        ("call Math.multiply 2", CommandType.CALL),
        ("return", CommandType.RETURN),
    ])
    def test_other_commands(self, text, expected):
        assert Command(text).type is expected

    def test_extra_whitespace_between_tokens(self):
        command = Command("push \t  local     3")
        assert command.type is CommandType.PUSH
        assert command.arg1 == "local"
        assert command.arg2 == 3

    def test_keywords_are_case_sensitive(self):
        with pytest.raises(MalformedCommandError):
            Command("Push constant 1").type

    def test_unknown_keyword(self):
        with pytest.raises(MalformedCommandError) as exc_info:
            Command("psh constant 7", line=12, filename="Main.vm").type
        message = str(exc_info.value)
        assert "Main.vm:12" in message
        assert "psh constant 7" in message
        assert "'push'" in message  # suggestion

    def test_empty_instruction(self):
        with pytest.raises(MalformedCommandError):
            Command("").type

    def test_malformed_is_a_parse_error(self):
        with pytest.raises(VMParseError):
            Command("jump").type


# =============================================================================
# Operand Tests
# =============================================================================

class TestArg1:
    """Command.arg1 for each command type."""

    @pytest.mark.parametrize("op", sorted(ARITHMETIC_OPERATORS))
    def test_arithmetic_returns_operator(self, op):
        assert Command(op).arg1 == op

    @pytest.mark.parametrize("text,expected", [
        ("push argument 1", "argument"),
        ("pop that 5", "that"),
        ("label END", "END"),
        ("goto END", "END"),
        ("if-goto END", "END"),
        ("function Sys.init 0", "Sys.init"),
        ("call Sys.init 0", "Sys.init"),
    ])
    def test_second_token(self, text, expected):
        assert Command(text).arg1 == expected

    def test_return_has_no_arg1(self):
        with pytest.raises(InvalidOperandAccessError) as exc_info:
            Command("return").arg1
        assert exc_info.value.operand == "arg1"
        assert exc_info.value.command_type == "RETURN"

    def test_missing_argument(self):
        with pytest.raises(MalformedCommandError):
            Command("label").arg1

    def test_inline_comment_is_not_an_operand(self):
        command = Command("push constant 7 // seven")
        assert command.arg1 == "constant"
        assert command.arg2 == 7


class TestArg2:
    """Command.arg2 for each command type."""

    @pytest.mark.parametrize("text,expected", [
        ("push constant 0", 0),
        ("pop static 8", 8),
        ("function Main.fib 3", 3),
        ("call Main.fib 1", 1),
        ("push constant 32767", 32767),
        ("push constant +5", 5),
    ])
    def test_numeric_operand(self, text, expected):
        assert Command(text).arg2 == expected

    @pytest.mark.parametrize("text", [
        "add", "not", "label L", "goto L", "if-goto L", "return",
    ])
    def test_not_defined(self, text):
        with pytest.raises(InvalidOperandAccessError) as exc_info:
            Command(text).arg2
        assert exc_info.value.operand == "arg2"

    @pytest.mark.parametrize("text", [
        "push constant x",
        "push constant -1",
        "push constant 1.5",
        "push constant ++5",
        "push constant +",
        "push constant",
        "call Foo.bar",
    ])
    def test_malformed_number(self, text):
        with pytest.raises(MalformedCommandError):
            Command(text).arg2

    def test_has_arg2(self):
        assert Command("push constant 1").has_arg2()
        assert not Command("add").has_arg2()


# =============================================================================
# Snapshot Behaviour Tests
# =============================================================================

class TestSnapshot:
    """Commands are immutable and their accessors are pure."""

    def test_frozen(self):
        command = Command("add")
        with pytest.raises(dataclasses.FrozenInstanceError):
            command.text = "sub"  # type: ignore[misc]

    def test_repeated_reads_agree(self):
        command = Command("pop local 2")
        assert command.type is command.type
        assert command.arg1 == command.arg1 == "local"
        assert command.arg2 == command.arg2 == 2

    def test_location_and_str(self):
        command = Command("return", line=9, filename="Foo.vm")
        assert str(command.location) == "Foo.vm:9"
        assert str(command) == "return"
