import pytest

from pico_debug.matcher import matches


class TestLiteralPatterns:
    @pytest.mark.parametrize("name", ["app", "worker:a", "", "a-b_c.d"])
    def test_equal_strings_match(self, name):
        assert matches(name, name) is True

    @pytest.mark.parametrize(
        "name,pattern",
        [("app", "ap"), ("ap", "app"), ("App", "app"), ("worker:a", "worker:b"), ("", "x")],
    )
    def test_different_strings_do_not_match(self, name, pattern):
        assert matches(name, pattern) is False


class TestWildcards:
    @pytest.mark.parametrize("name", ["", "app", "worker:a", "*"])
    def test_star_matches_everything(self, name):
        assert matches(name, "*") is True

    def test_prefix_wildcard(self):
        assert matches("worker:a", "worker:*") is True

    def test_prefix_wildcard_requires_delimiter(self):
        assert matches("worker", "worker:*") is False

    def test_prefix_wildcard_matches_empty_remainder(self):
        assert matches("worker:", "worker:*") is True

    def test_suffix_wildcard(self):
        assert matches("connect:session", "*:session") is True
        assert matches("connect:sessions", "*:session") is False

    def test_inner_wildcard_backtracks(self):
        assert matches("a:b:c:d", "a:*:d") is True
        assert matches("abcbcd", "a*bcd") is True
        assert matches("abcbce", "a*bcd") is False

    def test_multiple_wildcards(self):
        assert matches("http:server:request", "*:*:*") is True
        assert matches("http:server", "*:*:*") is False

    def test_adjacent_and_trailing_stars(self):
        assert matches("abc", "a**") is True
        assert matches("abc", "**c") is True
        assert matches("abc", "abc***") is True

    def test_star_is_only_metacharacter(self):
        assert matches("a.c", "a?c") is False
        assert matches("abc", "a.c") is False
        assert matches("a?c", "a?c") is True
