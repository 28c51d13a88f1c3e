from proxer.core.params import build_body


def test_only_present_keys_in_declared_order():
    assert build_body(("id", 5), ("language", None), ("episode", 2)) == "id=5&episode=2"
    assert build_body(("episode", 2), ("id", 5)) == "episode=2&id=5"


def test_nothing_present_gives_empty_body():
    assert build_body() == ""
    assert build_body(("p", None), ("limit", None)) == ""


def test_zero_and_empty_string_are_present():
    assert build_body(("nid", 0), ("search", "")) == "nid=0&search="


def test_booleans_and_sequences():
    assert build_body(("isH", True), ("read", False)) == "isH=true&read=false"
    assert build_body(("genre", ["Action", "Drama"])) == "genre=Action+Drama"


def test_array_keys_repeat():
    assert build_body(("users[]", ["a", "b"])) == "users%5B%5D=a&users%5B%5D=b"


def test_values_are_escaped():
    assert build_body(("text", "hi & bye")) == "text=hi+%26+bye"
