from rustlings.exercises.generics import Wrapper


def test_store_int_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"


def test_wrappers_compare_by_value():
    assert Wrapper([1, 2]) == Wrapper([1, 2])
    assert Wrapper(1) != Wrapper(2)