import pytest

from corekit.pipeline import pipeline


def test_pipeline_cubes_three_numbers():
    assert list(pipeline([1, 2, 3])) == [1.0, 8.0, 27.0]


def test_pipeline_empty_input_yields_nothing():
    assert list(pipeline([])) == []


def test_pipeline_multiple_numbers():
    expected = [1.0, 8.0, 27.0, 64.0, 125.0, 216.0, 343.0, 512.0, 729.0, 1000.0]
    assert list(pipeline(range(1, 11))) == expected


def test_pipeline_accepts_a_generator():
    source = (n for n in (0, 255))
    assert list(pipeline(source)) == [0.0, 16581375.0]


def test_pipeline_results_are_floats():
    results = list(pipeline([4]))
    assert results == [64.0]
    assert isinstance(results[0], float)


@pytest.mark.parametrize("bad", [-1, 256, 3.0, "7"])
def test_pipeline_rejects_out_of_range_values(bad):
    with pytest.raises(ValueError):
        list(pipeline([1, bad]))


def test_pipeline_is_lazy():
    stage = pipeline([2, 300])
    assert next(stage) == 8.0
    with pytest.raises(ValueError):
        next(stage)