"""
Tests for the utilkit command line front end.

These tests verify:
    - Function lookup and rejection of non-functions
    - Argument parsing (numbers, YAML mappings)
    - Arity checks before calling
    - text / json / yaml rendering
    - main() exit codes and output streams
"""

import json
import logging
import math

import pytest
import yaml

from utilkit import number, string
from utilkit.cli import (
    CommandError,
    invoke,
    main,
    parse_arguments,
    render_result,
    resolve_function,
    setup_logging,
)


class TestResolveFunction:
    """Test helper lookup."""

    def test_resolve_string_function(self):
        assert resolve_function("string", "kebab_case") is string.kebab_case

    def test_resolve_number_function(self):
        assert resolve_function("number", "to_ordinal") is number.to_ordinal

    def test_unknown_module(self):
        with pytest.raises(CommandError):
            resolve_function("bytes", "reverse")

    def test_unknown_function(self):
        with pytest.raises(CommandError):
            resolve_function("string", "shout")

    def test_private_name(self):
        with pytest.raises(CommandError):
            resolve_function("number", "_is_integral")

    def test_non_function_exports(self):
        """Constants and classes in __all__ are not callable commands."""
        with pytest.raises(CommandError):
            resolve_function("number", "NAN")
        with pytest.raises(CommandError):
            resolve_function("string", "CaseFormat")


class TestParseArguments:
    """Test conversion of command line strings."""

    def test_number_arguments(self):
        assert parse_arguments("number", "clamp", ["15", "1", "10"]) == [15, 1, 10]

    def test_number_float_arguments(self):
        assert parse_arguments("number", "median", ["1.5", "-2"]) == [1.5, -2]

    def test_number_rejects_text(self):
        with pytest.raises(CommandError):
            parse_arguments("number", "is_prime", ["seven"])

    def test_string_arguments_stay_text(self):
        assert parse_arguments("string", "is_numeric", ["123"]) == ["123"]

    def test_format_named_mapping(self):
        args = parse_arguments("string", "format_named", ["hi {name}", "{name: Ada}"])
        assert args == ["hi {name}", {"name": "Ada"}]

    def test_format_named_empty_mapping(self):
        assert parse_arguments("string", "format_named", ["hi {name}", ""]) == ["hi {name}", {}]

    def test_format_named_rejects_non_mapping(self):
        with pytest.raises(CommandError):
            parse_arguments("string", "format_named", ["hi {name}", "[1, 2]"])

    def test_format_named_rejects_bad_yaml(self):
        with pytest.raises(CommandError):
            parse_arguments("string", "format_named", ["hi {name}", "{name: ["])

    def test_truncate_length_is_number(self):
        """Numeric parameters of string helpers are parsed too."""
        args = parse_arguments("string", "truncate", ["hello world", "5", "~"])
        assert args == ["hello world", 5, "~"]

    def test_truncate_rejects_text_length(self):
        with pytest.raises(CommandError):
            parse_arguments("string", "truncate", ["hello world", "five"])

    def test_mask_custom_char_stays_text(self):
        assert parse_arguments("string", "mask", ["abc", "7"]) == ["abc", "7"]

    def test_format_variadic_text(self):
        assert parse_arguments("string", "format", ["{0}-{1}", "1", "b"]) == ["{0}-{1}", "1", "b"]

    def test_convert_case_format_stays_text(self):
        assert parse_arguments("string", "convert_case", ["helloWorld", "snake"]) == ["helloWorld", "snake"]

    @pytest.mark.parametrize("raw", ["nan", "inf", "-inf", "1_000", ""])
    def test_number_rejects_non_finite(self, raw):
        with pytest.raises(CommandError):
            parse_arguments("number", "is_even", [raw])

    def test_number_exponent(self):
        assert parse_arguments("number", "is_even", ["1e3"]) == [1000.0]

    def test_random_source_not_fillable(self):
        """random's rng parameter cannot be supplied from the command line."""
        assert parse_arguments("number", "random", ["0", "1"]) == [0, 1]
        with pytest.raises(CommandError):
            parse_arguments("number", "random", ["0", "1", "5"])

    def test_too_many_arguments(self):
        with pytest.raises(CommandError):
            parse_arguments("string", "reverse", ["ab", "cd"])


class TestInvoke:
    """Test calling helpers with checked arguments."""

    def test_invoke_with_parsed_arguments(self):
        """Arguments coming from the command line are converted before the call."""
        args = parse_arguments("string", "truncate", ["hello world", "5"])
        assert invoke(string.truncate, args) == "he..."

    def test_invoke_wrong_arity(self):
        with pytest.raises(CommandError):
            invoke(string.reverse, [])

    def test_invoke_too_many(self):
        with pytest.raises(CommandError):
            invoke(number.is_prime, [1, 2])

    def test_invoke_unknown_case_format(self):
        with pytest.raises(CommandError):
            invoke(string.convert_case, ["hello", "sponge"])


class TestRenderResult:
    """Test output formats."""

    def test_text(self):
        assert render_result("number", "get_divisors", [6], [1, 2, 3]) == "[1, 2, 3]"

    def test_json(self):
        rendered = render_result("number", "median", [4, 1, 3, 2], 2.5, "json")
        assert json.loads(rendered) == {
            "module": "number",
            "function": "median",
            "args": [4, 1, 3, 2],
            "result": 2.5,
        }

    def test_yaml(self):
        rendered = render_result("string", "kebab_case", ["helloWorld"], "hello-world", "yaml")
        assert yaml.safe_load(rendered) == {
            "module": "string",
            "function": "kebab_case",
            "args": ["helloWorld"],
            "result": "hello-world",
        }

    def test_unknown_format(self):
        with pytest.raises(CommandError):
            render_result("string", "reverse", ["ab"], "ba", "xml")

    def test_json_nan_is_null(self):
        """The NAN sentinel is written as null, keeping the JSON strict."""
        rendered = render_result("number", "average", [], number.NAN, "json")
        assert "NaN" not in rendered
        assert json.loads(rendered)["result"] is None

    def test_json_nested_nan(self):
        rendered = render_result("number", "max", [1.0, number.NAN], number.NAN, "json")
        assert json.loads(rendered)["args"] == [1.0, None]

    def test_yaml_nan(self):
        rendered = render_result("number", "average", [], number.NAN, "yaml")
        assert math.isnan(yaml.safe_load(rendered)["result"])


@pytest.fixture
def restore_root_logging():
    """Undo the root handler changes setup_logging makes."""
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.mark.usefixtures("restore_root_logging")
class TestMain:
    """Test the command line entry point."""

    def test_main_text(self, capsys):
        assert main(["string", "kebab_case", "helloWorld", "--output", "text"]) == 0
        assert capsys.readouterr().out == "hello-world\n"

    def test_main_negative_number(self, capsys):
        assert main(["number", "mod", "-5", "3", "--output", "text"]) == 0
        assert capsys.readouterr().out == "1\n"

    def test_main_json(self, capsys):
        assert main(["number", "to_ordinal", "22", "--output", "json"]) == 0
        assert json.loads(capsys.readouterr().out)["result"] == "22nd"

    def test_main_truncate(self, capsys):
        assert main(["string", "truncate", "hello world", "5", "--output", "text"]) == 0
        assert capsys.readouterr().out == "he...\n"

    def test_main_truncate_custom_suffix(self, capsys):
        assert main(["string", "truncate", "hello world", "6", "~", "--output", "text"]) == 0
        assert capsys.readouterr().out == "hello~\n"

    def test_main_truncate_bad_length(self, capsys):
        assert main(["string", "truncate", "hello world", "five", "--output", "text"]) == 2
        assert "Expected a number" in capsys.readouterr().err

    def test_main_mask_custom_char(self, capsys):
        assert main(["string", "mask", "abc", "#", "--output", "text"]) == 0
        assert capsys.readouterr().out == "###\n"

    def test_main_format_named(self, capsys):
        assert main(["string", "format_named", "hi {name}", "{name: Ada}", "--output", "text"]) == 0
        assert capsys.readouterr().out == "hi Ada\n"

    def test_main_random_extra_argument(self, capsys):
        assert main(["number", "random", "0", "1", "5", "--output", "text"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Too many arguments" in captured.err

    def test_main_random(self, capsys):
        assert main(["number", "random", "5", "10", "--output", "text"]) == 0
        assert 5 <= float(capsys.readouterr().out) < 10

    def test_main_json_nan_strict(self, capsys):
        """Degraded results still produce strict JSON."""
        def reject(token):
            raise ValueError(token)

        assert main(["number", "average", "--output", "json"]) == 0
        document = json.loads(capsys.readouterr().out, parse_constant=reject)
        assert document["result"] is None

    def test_main_yaml_nan(self, capsys):
        assert main(["number", "average", "--output", "yaml"]) == 0
        assert math.isnan(yaml.safe_load(capsys.readouterr().out)["result"])

    def test_main_error(self, capsys):
        assert main(["string", "shout", "hi", "--output", "text"]) == 2
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Unknown function" in captured.err


class TestSetupLogging:
    """Test CLI logging configuration."""

    def test_setup_logging_single_handler(self, restore_root_logging):
        """Repeated setup should not stack handlers."""
        setup_logging("DEBUG")
        setup_logging("DEBUG")
        assert len(restore_root_logging.handlers) == 1
        assert restore_root_logging.level == logging.DEBUG

    def test_setup_logging_unknown_level(self, restore_root_logging):
        setup_logging("chatty")
        assert restore_root_logging.level == logging.WARNING
