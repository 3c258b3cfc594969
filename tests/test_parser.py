import pytest

from pico_debug.parser import ParsedSpec, parse_spec, serialize_spec


class TestParseSpec:
    @pytest.mark.parametrize("spec", [None, "", "   ", ",,,", " , \n\t", 42])
    def test_empty_or_invalid_enables_nothing(self, spec):
        assert parse_spec(spec) == ParsedSpec((), ())

    def test_single_name(self):
        assert parse_spec("app") == ParsedSpec(("app",), ())

    def test_commas_and_whitespace_are_separators(self):
        parsed = parse_spec("  app, worker:*  -worker:noisy\tdb ")
        assert parsed.includes == ("app", "worker:*", "db")
        assert parsed.excludes == ("worker:noisy",)

    def test_leading_dash_moves_to_excludes(self):
        parsed = parse_spec("*,-connect:*")
        assert parsed.includes == ("*",)
        assert parsed.excludes == ("connect:*",)

    def test_only_first_dash_is_stripped(self):
        assert parse_spec("--x").excludes == ("-x",)

    def test_dash_inside_name_is_literal(self):
        assert parse_spec("my-app").includes == ("my-app",)

    def test_order_is_preserved(self):
        parsed = parse_spec("c,-z,a,-y,b")
        assert parsed.includes == ("c", "a", "b")
        assert parsed.excludes == ("z", "y")


class TestSerializeSpec:
    def test_includes_then_excludes(self):
        assert serialize_spec(ParsedSpec(("a", "b:*"), ("b:x",))) == "a,b:*,-b:x"

    def test_empty(self):
        assert serialize_spec(ParsedSpec()) == ""

    def test_inverse_of_parse(self):
        parsed = parse_spec("a  b:* -c,-d:*")
        assert parse_spec(serialize_spec(parsed)) == parsed
