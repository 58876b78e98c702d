import io

import pytest

from dsakit.stack import Stack, StackOverflow, StackUnderflow, main


def test_push_pop_is_last_in_first_out():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert len(stack) == 0


def test_peek_does_not_remove():
    stack = Stack()
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1
    assert list(stack) == [7]


def test_iteration_is_bottom_to_top():
    stack = Stack()
    for value in (4, 5, 6):
        stack.push(value)
    assert list(stack) == [4, 5, 6]


def test_overflow_at_capacity():
    stack = Stack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackOverflow):
        stack.push(3)
    assert list(stack) == [1, 2]


def test_default_capacity_is_one_hundred():
    stack = Stack()
    for value in range(100):
        stack.push(value)
    with pytest.raises(StackOverflow):
        stack.push(100)


def test_pop_empty_underflows():
    with pytest.raises(StackUnderflow):
        Stack().pop()


def test_peek_empty_underflows():
    with pytest.raises(StackUnderflow):
        Stack().peek()


def test_invalid_capacity():
    with pytest.raises(ValueError):
        Stack(capacity=0)


def _run(monkeypatch, capsys, text, argv=()):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(list(argv))
    return code, capsys.readouterr().out


def test_main_push_and_peek(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 5\n1 9\n3\n5\n")
    assert code == 0
    assert "Pushed 5 to stack" in out
    assert "Stack: 5 9" in out
    assert "Top element: 9" in out


def test_main_pop_and_underflow(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "1 4\n2\n2\n5\n")
    assert code == 0
    assert "Popped 4 from stack" in out
    assert "Error: Stack underflow" in out


def test_main_overflow_with_small_capacity(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "1 1\n1 2\n4\n", argv=["--capacity", "1"])
    assert "Error: Stack overflow" in out
    assert out.count("Pushed") == 1


def test_main_invalid_choice_and_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "8\n")
    assert code == 0
    assert "Invalid choice" in out