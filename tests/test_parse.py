import pytest

from mysh.parse import (
    MAX_ARGS,
    MAX_CMDS,
    PipelineError,
    count_pipes,
    has_pipeline,
    parse_input,
    parse_pipeline,
    parse_redirection,
)


def test_parse_input_splits_on_blanks():
    assert parse_input("  ls -l\t/tmp\r\n") == ["ls", "-l", "/tmp"]


def test_parse_input_empty():
    assert parse_input(" \t\n") == []


def test_parse_input_caps_word_count():
    words = [str(i) for i in range(200)]
    result = parse_input(" ".join(words))
    assert result == words[: MAX_ARGS - 1]


def test_count_and_has_pipeline():
    args = ["a", "|", "b", "|", "c"]
    assert count_pipes(args) == 2
    assert has_pipeline(args)
    assert not has_pipeline(["ls", "-l"])
    assert count_pipes(["ls"]) == 0


def test_parse_pipeline_splits_commands():
    assert parse_pipeline(["ls", "-l", "|", "wc", "-l"]) == [["ls", "-l"], ["wc", "-l"]]


def test_parse_pipeline_without_pipe_is_single_command():
    assert parse_pipeline(["ls"]) == [["ls"]]


def test_parse_pipeline_largest_allowed():
    args = ["x"]
    for _ in range(MAX_CMDS - 2):
        args += ["|", "x"]
    commands = parse_pipeline(args)
    assert len(commands) == MAX_CMDS - 1
    assert all(cmd == ["x"] for cmd in commands)


def test_parse_pipeline_too_many_pipes():
    args = ["x"]
    for _ in range(MAX_CMDS - 1):
        args += ["|", "x"]
    with pytest.raises(PipelineError, match="Too many pipes"):
        parse_pipeline(args)


def test_redirection_input_and_output():
    args, redir = parse_redirection(["cat", "<", "in.txt", ">", "out.txt"])
    assert args == ["cat"]
    assert redir.stdin == "in.txt"
    assert redir.stdout == "out.txt"
    assert redir.append is False


def test_redirection_append():
    args, redir = parse_redirection(["echo", "hi", ">>", "log"])
    assert args == ["echo", "hi"]
    assert redir.outputs == [("log", True)]
    assert redir.append is True


def test_redirection_last_output_wins_but_all_listed():
    _, redir = parse_redirection(["ls", ">", "a", ">", "b"])
    assert redir.outputs == [("a", False), ("b", False)]
    assert redir.stdout == "b"


def test_redirection_missing_file_reported(capsys):
    args, redir = parse_redirection(["ls", ">"])
    assert args == ["ls", ">"]
    assert redir.stdout is None
    assert "Syntax error: no output file" in capsys.readouterr().err


def test_redirection_missing_input_reported(capsys):
    args, redir = parse_redirection(["sort", "<"])
    assert args == ["sort", "<"]
    assert redir.stdin is None
    assert "Syntax error: no input file" in capsys.readouterr().err


def test_no_redirection_keeps_args():
    args, redir = parse_redirection(["ls", "-a"])
    assert args == ["ls", "-a"]
    assert redir.inputs == [] and redir.outputs == []