import io

from mysh.history import MAX_HISTORY, History


def test_entries_are_numbered_from_one():
    history = History()
    for cmd in ("ls", "pwd", "echo hi"):
        history.add(cmd)
    assert history.entries() == [(1, "ls"), (2, "pwd"), (3, "echo hi")]


def test_entries_with_count():
    history = History()
    for cmd in ("a", "b", "c"):
        history.add(cmd)
    assert history.entries(2) == [(2, "b"), (3, "c")]
    assert history.entries(10) == [(1, "a"), (2, "b"), (3, "c")]
    assert history.entries(0) == []


def test_rotation_keeps_capacity():
    history = History()
    for i in range(MAX_HISTORY + 5):
        history.add(f"cmd{i}")
    entries = history.entries()
    assert len(entries) == MAX_HISTORY
    assert entries[0] == (1, "cmd5")
    assert entries[-1] == (MAX_HISTORY, f"cmd{MAX_HISTORY + 4}")


def test_show_format():
    history = History()
    for cmd in ("a", "b", "c"):
        history.add(cmd)
    out = io.StringIO()
    assert history.show(["history", "2"], out) is True
    assert out.getvalue() == "    2  b\n    3  c\n"


def test_show_all_without_count():
    history = History()
    history.add("ls")
    out = io.StringIO()
    history.show(["history"], out)
    assert out.getvalue() == "    1  ls\n"


def test_show_non_numeric_count_prints_nothing():
    history = History()
    history.add("ls")
    out = io.StringIO()
    history.show(["history", "abc"], out)
    assert out.getvalue() == ""


def test_clear():
    history = History()
    history.add("ls")
    history.clear()
    assert history.entries() == []
    assert len(history) == 0