import pytest

from planisphere.astronomy.concat import ListConcatenation


def test_indexing_spans_sources():
    view = ListConcatenation([[1, 2], [], (3,), [4, 5, 6]])
    assert len(view) == 6
    assert [view[i] for i in range(6)] == [1, 2, 3, 4, 5, 6]
    assert view[-1] == 6
    assert view[1:4] == [2, 3, 4]


def test_iteration_and_sequence_mixins():
    view = ListConcatenation([["a"], ["b", "c"]])
    assert list(view) == ["a", "b", "c"]
    assert "c" in view
    assert view.index("b") == 1


def test_out_of_range():
    view = ListConcatenation([[1], [2]])
    with pytest.raises(IndexError):
        view[2]
    with pytest.raises(IndexError):
        ListConcatenation([])[0]


def test_elements_are_not_copied():
    first = [object()]
    view = ListConcatenation([first])
    assert view[0] is first[0]
    assert view.locate(0) == (0, 0)


def test_locate():
    view = ListConcatenation([[1, 2], [], [3]])
    assert view.locate(2) == (2, 0)
