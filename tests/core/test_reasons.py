from scamscope.core.reasons import ReasonSet


def test_first_insertion_fixes_order():
    rs = ReasonSet()
    assert rs.add("b") is True
    assert rs.add("a") is True
    assert rs.add("b") is False
    assert rs.as_tuple() == ("b", "a")
    assert len(rs) == 2
    assert "a" in rs
    assert list(rs) == ["b", "a"]


def test_seeded_from_iterable():
    assert ReasonSet(["x", "y", "x", "z", "y"]).as_tuple() == ("x", "y", "z")
