import json

import pytest

from matchjson.demo import main


def _run(capsys):
    status = main([])
    lines = capsys.readouterr().out.splitlines()
    return status, lines


def test_main_succeeds_and_prints_five_lines(capsys):
    status, lines = _run(capsys)
    assert status == 0
    assert len(lines) == 5


def test_string_is_bound_and_printed_bare(capsys):
    _, lines = _run(capsys)
    assert lines[0] == "123"


def test_object_destructuring_line(capsys):
    _, lines = _run(capsys)
    line = lines[1]
    assert line.startswith("1 2 ")
    rest_start = line.index("{")
    rest_end = line.index("}") + 1
    assert json.loads(line[rest_start:rest_end]) == {"d": 4}
    assert json.loads(line.rsplit(" ", 1)[1]) == [1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_object_destructuring_middle_slice(capsys):
    _, lines = _run(capsys)
    line = lines[1]
    middle = line[len("1 2 "):line.index("{")].strip()
    assert middle == "[3, 4, 5, 6, 7]"


def test_outer_binding_keeps_json_string(capsys):
    _, lines = _run(capsys)
    assert lines[2] == '"1"'
    assert json.loads(lines[2]) == "1"


def test_typed_and_expression_bindings(capsys):
    _, lines = _run(capsys)
    assert lines[3] == "1"
    assert json.loads(lines[4]) == 1


def test_output_is_repeatable(capsys):
    _, first = _run(capsys)
    _, second = _run(capsys)
    assert first == second


def test_unknown_argument_is_rejected(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2