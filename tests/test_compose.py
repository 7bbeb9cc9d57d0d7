"""Tests for compose — right-to-left function composition."""

from predux import compose


class TestCompose:
    def test_composes_right_to_left(self):
        double = lambda x: x * 2
        square = lambda x: x * x
        assert compose(square)(5) == 25
        assert compose(square, double)(5) == 100
        assert compose(double, square, double)(5) == 100

    def test_composes_functions_from_right_to_left(self):
        a = lambda nxt: lambda x: nxt(x + "a")
        b = lambda nxt: lambda x: nxt(x + "b")
        c = lambda nxt: lambda x: nxt(x + "c")
        final = lambda x: x

        assert compose(a, b, c)(final)("") == "abc"
        assert compose(b, c, a)(final)("") == "bca"
        assert compose(c, a, b)(final)("") == "cab"

    def test_rightmost_takes_multiple_arguments(self):
        square = lambda x: x * x
        add = lambda a, b, *, c=0: a + b + c
        assert compose(square, add)(1, 2) == 9
        assert compose(square, add)(1, 2, c=1) == 16

    def test_no_functions_is_identity(self):
        assert compose()(1) == 1
        sentinel = object()
        assert compose()(sentinel) is sentinel

    def test_single_function_returned_unchanged(self):
        def add(a, b):
            return a + b

        assert compose(add) is add
        assert compose(add)(1, 2) == 3
