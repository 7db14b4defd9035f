import pytest

from minishell.errors import (
    ShellSyntaxError,
    check_double_input,
    check_double_output,
    check_redirections,
    check_unexpected,
    format_cd_error,
    format_file_not_found,
    format_illegal_exit,
    format_not_found,
    strip_cd_input,
)


@pytest.mark.parametrize("line", ["| ls", "; ls", "< file"])
def test_leading_operator_is_unexpected(line):
    with pytest.raises(ShellSyntaxError) as exc:
        check_unexpected(line)
    assert exc.value.char == line[0]


def test_doubled_semicolon():
    with pytest.raises(ShellSyntaxError) as exc:
        check_unexpected("ls ; ; ls")
    assert exc.value.char == ";"


def test_pipe_right_after_redirection():
    with pytest.raises(ShellSyntaxError) as exc:
        check_unexpected("ls >| cat")
    assert exc.value.char == "|"


def test_redirection_after_pipe_expects_newline():
    with pytest.raises(ShellSyntaxError) as exc:
        check_unexpected("ls | > f")
    assert exc.value.char is None
    assert exc.value.format(1).endswith(": Synthax error: newline expected\n")


@pytest.mark.parametrize("line", ["ls | echo", "echo '; ;'", "", "echo hi"])
def test_valid_lines_pass(line):
    assert check_unexpected(line) is None


def test_dangling_redirection():
    with pytest.raises(ShellSyntaxError) as exc:
        check_redirections("ls >")
    assert exc.value.char is None


def test_triple_output_redirection():
    with pytest.raises(ShellSyntaxError) as exc:
        check_redirections("ls >>> f")
    assert exc.value.char == ">"


def test_spaced_double_input():
    with pytest.raises(ShellSyntaxError) as exc:
        check_redirections("cat < < f")
    assert exc.value.char == "<"


def test_redirections_ok():
    assert check_redirections("echo hi > out") is None


def test_double_output_detection():
    assert check_double_output("ls > > f") is True
    assert check_double_output("ls >> f") is False
    assert check_double_output("ls") is False


def test_double_input_detection():
    assert check_double_input("cat << f") is True
    assert check_double_input("cat < f") is False


def test_strip_cd_input_removes_markers():
    result = strip_cd_input("cd < dir")
    assert "<" not in result
    assert result.split() == ["cd", "dir"]


def test_strip_cd_input_leaves_other_commands():
    assert strip_cd_input("cd dir<x") == "cd dir<x"


def test_syntax_error_message():
    assert ShellSyntaxError("|").format(3) == "minishell: 3: Synthax error: '|' unexpected\n"


def test_cd_error_message():
    message = format_cd_error(4, "nowhere")
    assert message.startswith("minishell: 4: ")
    assert message.endswith("cd: can't cd to nowhere\n")


def test_not_found_messages():
    assert format_not_found(2, "foo", "bar") == "minishell: 2: foo bar: not found\n"
    assert format_not_found(2, "foo", "").endswith(": foo: not found\n")


def test_file_not_found_message():
    assert format_file_not_found(7) == "minishell: 7: file not found\n"


def test_illegal_exit_message():
    message = format_illegal_exit(1, "abc")
    assert message.endswith(": exit : Illegal number: abc\n")
    assert message.startswith("minishell: 1")