from lazyiter import ClosureCursor, TrimCursor


class TestClosureCursor:
    """Test elementwise transformation"""

    def test_function_receives_value_and_key(self):
        cursor = ClosureCursor(["a", "b"], lambda value, key: f"{key}:{value}")
        assert list(cursor) == ["0:a", "1:b"]

    def test_keys_untouched(self):
        cursor = ClosureCursor({"x": 2, "y": 3}, lambda value, key: value * 10)
        assert list(cursor.items()) == [("x", 20), ("y", 30)]

    def test_applied_on_read_only(self):
        """Nothing is computed for elements that are skipped over"""
        calls = []

        def square(value, key):
            calls.append(value)
            return value * value

        cursor = ClosureCursor(range(5), square)
        cursor.advance()
        cursor.advance()
        assert cursor.current() == 4
        assert calls == [2]

    def test_exhausted_returns_none_without_calling(self):
        cursor = ClosureCursor([], lambda value, key: 1 / 0)
        assert cursor.current() is None


class TestTrimCursor:
    """Test string trimming"""

    def test_default_whitespace(self):
        assert list(TrimCursor(["  a ", "\tb\n", "\x00c\v"])) == ["a", "b", "c"]

    def test_custom_characters(self):
        assert list(TrimCursor(["--x--", "-y"], "-")) == ["x", "y"]

    def test_none_uses_default(self):
        assert TrimCursor([], None).characters == TrimCursor.DEFAULT_CHARACTERS

    def test_non_strings_pass_through(self):
        assert list(TrimCursor([" a ", 5, None])) == ["a", 5, None]
