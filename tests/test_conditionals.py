from rustdrill.drills.conditionals import bigger, foo_if_fizz


def test_ten_is_bigger_than_eight():
    assert bigger(10, 8) == 10


def test_fortytwo_is_bigger_than_thirtytwo():
    assert bigger(32, 42) == 42


def test_bigger_is_symmetric():
    assert bigger(3, -7) == bigger(-7, 3)


def test_foo_for_fizz():
    assert foo_if_fizz("fizz") == "foo"


def test_bar_for_fuzz():
    assert foo_if_fizz("fuzz") == "bar"


def test_default_to_baz():
    assert foo_if_fizz("literally anything") == "baz"