import pytest

from corekit.difference import find_difference, main


@pytest.mark.parametrize(
    "first, second, expected",
    [
        (
            ["apple", "banana", "cherry", "date", "43", "lead", "gno1"],
            ["banana", "date", "fig"],
            ["apple", "cherry", "43", "lead", "gno1"],
        ),
        (["a", "b", "c"], ["d", "e", "f"], ["a", "b", "c"]),
        (["a", "b", "c"], ["a", "b", "c"], []),
        ([], ["a", "b", "c"], []),
        (["a", "b", "c"], [], ["a", "b", "c"]),
        ([], [], []),
        (["a", "b", "a", "c"], ["b"], ["a", "a", "c"]),
        (["a", "b", "c"], ["b", "b"], ["a", "c"]),
    ],
    ids=[
        "example",
        "no-common",
        "all-common",
        "empty-first",
        "empty-second",
        "both-empty",
        "duplicate-in-first",
        "duplicate-in-second",
    ],
)
def test_find_difference(first, second, expected):
    assert find_difference(first, second) == expected


def test_inputs_untouched():
    first = ["a", "b"]
    second = ["b"]
    find_difference(first, second)
    assert first == ["a", "b"]
    assert second == ["b"]


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Difference between slices: [apple cherry 43 lead gno1]",
        "Difference between slices: [a b c]",
        "Difference between slices: []",
    ]