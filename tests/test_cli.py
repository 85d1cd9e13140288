import io

import pytest

from psolve.anagrams import anagram_groups, format_groups
from psolve.cli import main, solve
from psolve.counting import sum_without_max
from psolve.grid import ripening_days
from psolve.sequences import binomial, describe_perfect, polygon_area


def test_sum_without_max_problem():
    assert solve("11908", "3\n1 2 3\n") == f"{sum_without_max([1, 2, 3])}\n"


def test_tomato_problem_reads_layers():
    text = "3 2 2\n1 0 0\n0 0 -1\n0 0 0\n-1 0 0\n"
    boxes = [[[1, 0, 0], [0, 0, -1]], [[0, 0, 0], [-1, 0, 0]]]
    assert solve("7569", text) == f"{ripening_days(boxes)}\n"


def test_anagram_problem_reads_to_end():
    words = ["tea", "eat", "ate", "tan", "nat", "bat"]
    assert solve("6566", " ".join(words)) == format_groups(anagram_groups(words))


def test_perfect_problem_stops_at_minus_one():
    expected = "".join(describe_perfect(n) + "\n" for n in (6, 12, 28))
    assert solve("9506", "6\n12\n28\n-1\n99\n") == expected


def test_towers_problem_output():
    assert solve("2493", "5\n6 9 5 7 4\n") == "0 0 2 2 4 "


def test_next_greater_output_format():
    assert solve("17298", "4\n3 5 2 7\n") == "5 7 7 -1 \n"


def test_binomial_problem_stops_at_zero_pair():
    assert solve("6591", "5 2\n10 3\n0 0\n") == f"{binomial(5, 2)}\n{binomial(10, 3)}\n"


def test_polygon_problem_one_decimal():
    points = [(0, 0), (0, 3), (3, 3), (3, 0)]
    text = "4\n" + "".join(f"{x} {y}\n" for x, y in points)
    assert solve("2166", text) == f"{polygon_area(points):.1f}\n"


def test_unknown_problem_raises():
    with pytest.raises(ValueError, match="unknown problem"):
        solve("1", "")


def test_truncated_input_raises():
    with pytest.raises(ValueError, match="unexpected end"):
        solve("11908", "3\n1 2\n")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n1 2 3\n"))
    assert main(["11908"]) == 0
    assert capsys.readouterr().out == solve("11908", "3\n1 2 3\n")


def test_main_reads_file(tmp_path, capsys):
    source = tmp_path / "input.txt"
    source.write_text("5\n6 9 5 7 4\n", encoding="utf-8")
    assert main(["2493", str(source)]) == 0
    assert capsys.readouterr().out == solve("2493", "5\n6 9 5 7 4\n")


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n1\n"))
    assert main(["11908"]) == 1
    assert "unexpected end" in capsys.readouterr().err


def test_main_rejects_unknown_problem():
    with pytest.raises(SystemExit) as info:
        main(["1"])
    assert info.value.code == 2