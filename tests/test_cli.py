import pytest

from pushswap.cli import main, parse_number
from pushswap.sort import solve
from pushswap.stacks import Machine


def _replay(numbers, operations):
    machine = Machine(numbers)
    for op in operations:
        kind, name = op[:-1], op[-1]
        {"s": machine.swap, "p": machine.push, "r": machine.rotate,
         "rr": machine.reverse_rotate}[kind](name)
    return machine


def test_parse_number_plain_and_padded():
    assert parse_number("42") == 42
    assert parse_number(" -7 ") == -7


def test_parse_number_rejects_text():
    with pytest.raises(ValueError):
        parse_number("abc")


def test_main_no_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_solution(capsys):
    assert main(["3", "1", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == solve([3, 1, 2])


def test_main_output_sorts(capsys):
    args = ["8", "-1", "5", "3", "12", "0"]
    assert main(args) == 0
    lines = capsys.readouterr().out.splitlines()
    numbers = [int(a) for a in args]
    machine = _replay(numbers, lines)
    assert machine.b == []
    assert [n.content for n in machine.a] == sorted(numbers)


def test_main_bad_number_reports_error(capsys):
    assert main(["x", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_single_number_reports_error(capsys):
    assert main(["5"]) == 1
    assert capsys.readouterr().err == "Error\n"