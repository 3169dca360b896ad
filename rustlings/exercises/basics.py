"""Solutions to the first exercises: functions and conditionals."""

__all__ = ["bigger", "foo_if_fizz", "call_me", "sale_price", "is_even", "square"]


def bigger(a: int, b: int) -> int:
    """Return the bigger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map "fizz" to "foo", "fuzz" to "bar" and anything else to "baz"."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def call_me(num: int) -> None:
    """Print one ring line per call."""
    for i in range(num):
        print(f"Ring! Call number {i + 1}")


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Ten off an even price, three off an odd one."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num