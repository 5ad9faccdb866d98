import pytest
from archns.numrange import NumericRange

def test_contains_and_end():
    r = NumericRange(10, 4)
    assert r.end == 14
    assert r.contains(10) and r.contains(13)
    assert not r.contains(9) and not r.contains(14)
    assert list(r) == [10, 11, 12, 13]
    assert len(r) == 4
    assert str(r) == "[10, 14)"

@pytest.mark.parametrize("a, b, expected", [
    ((0, 10), (10, 5), False),   # contiguos
    ((0, 10), (9, 5), True),
    ((5, 2), (0, 100), True),    # contenido
    ((0, 0), (0, 10), False),    # vacío
])
def test_overlaps(a, b, expected):
    ra, rb = NumericRange(*a), NumericRange(*b)
    assert ra.overlaps(rb) == expected
    assert rb.overlaps(ra) == expected

def test_offset():
    r = NumericRange(100, 3)
    assert r.offset(102) == 2
    with pytest.raises(ValueError):
        r.offset(103)

def test_invalid():
    with pytest.raises(ValueError):
        NumericRange(-1, 4)
    with pytest.raises(ValueError):
        NumericRange(0, -4)
