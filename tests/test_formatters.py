import pytest

from pico_debug.config import DebugSettings
from pico_debug.exceptions import InvalidFormatterError
from pico_debug.formatters import (
    FormatterTable,
    format_int,
    format_json,
    inspect_multi_line,
    inspect_single_line,
)


class TestBuiltins:
    def test_builtin_letters_present(self, formatters):
        for letter in "oOsdj":
            assert letter in formatters

    def test_s_uses_str(self, formatters):
        assert formatters["s"](42) == "42"
        assert formatters["s"]("ok") == "ok"

    @pytest.mark.parametrize(
        "value,expected",
        [(42, "42"), (3.9, "3"), (-2.5, "-2"), (True, "1"), ("17", "17"), ("2.5", "2"), ("abc", "NaN"),
         (None, "0"), (float("nan"), "NaN"), (float("inf"), "NaN")],
    )
    def test_int_formatting(self, value, expected):
        assert format_int(value) == expected

    def test_json(self):
        assert format_json({"a": [1, 2]}) == '{"a": [1, 2]}'

    def test_json_circular(self):
        data = []
        data.append(data)
        assert format_json(data) == "[Circular]"

    def test_json_unknown_objects_use_repr(self):
        class Thing:
            def __repr__(self):
                return "<thing>"

        assert format_json({"t": Thing()}) == '{"t": "<thing>"}'

    def test_single_line_inspect_stays_on_one_line(self):
        value = {"key%d" % i: list(range(10)) for i in range(20)}
        assert "\n" not in inspect_single_line(value)

    def test_multi_line_inspect_wraps(self):
        value = {"key%d" % i: list(range(10)) for i in range(20)}
        assert "\n" in inspect_multi_line(value)

    def test_inspect_quotes_strings(self):
        assert inspect_single_line("hi") == "'hi'"
        assert inspect_multi_line("hi") == "'hi'"

    def test_depth_setting_limits_nesting(self):
        table = FormatterTable(DebugSettings(depth=1))
        assert table["o"]({"a": {"b": 1}}) == "{'a': {...}}"


class TestRegistration:
    def test_register_custom_letter(self, formatters):
        formatters.register("h", lambda v: v.hex())
        assert formatters.get("h")(b"\x01") == "01"

    def test_last_write_wins(self, formatters):
        formatters["x"] = lambda v: "first"
        formatters["x"] = lambda v: "second"
        assert formatters["x"](None) == "second"

    def test_override_builtin(self, formatters):
        formatters.register("s", lambda v: "<%s>" % v)
        assert formatters["s"]("a") == "<a>"

    def test_unregister(self, formatters):
        formatters.unregister("j")
        assert formatters.get("j") is None

    def test_unregister_unknown_is_noop(self, formatters):
        formatters.unregister("q")
        assert "q" not in formatters

    @pytest.mark.parametrize("letter", ["", "ab", "1", "%", "é", None])
    def test_rejects_invalid_letters(self, formatters, letter):
        with pytest.raises(InvalidFormatterError):
            formatters.register(letter, str)

    def test_rejects_non_callable(self, formatters):
        with pytest.raises(InvalidFormatterError) as exc_info:
            formatters.register("x", "not callable")
        assert exc_info.value.letter == "x"
        assert "not callable" in str(exc_info.value)

    def test_tables_are_independent(self, settings):
        first = FormatterTable(settings)
        second = FormatterTable(settings)
        first.register("x", str)
        assert "x" not in second
