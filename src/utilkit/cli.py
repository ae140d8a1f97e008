"""
Command line front end for utilkit.

Calls any public string or number helper from the shell:

    python -m utilkit string kebab_case helloWorld
    python -m utilkit number median 4 1 3 2 --output json
    python -m utilkit string format_named "hi {name}" "{name: Ada}"

Argument handling follows each parameter's annotation:
    - numeric parameters (truncate's max_length, every number helper
      argument) take finite ints or floats; anything else is rejected.
    - mapping parameters (format_named) are parsed as YAML.
    - text parameters are passed through unchanged.
    - parameters with no command line form (random's rng) cannot be filled.

Output formats:
    - text: the bare result
    - json / yaml: a document with module, function, args and result keys.
      JSON writes the NAN sentinel as null; YAML writes it as .nan.
"""

import argparse
import collections.abc
import inspect
import json
import logging
import math
import sys
from typing import Any, Callable, Dict, List, Optional, Sequence, Union, get_origin

import yaml

from utilkit import number, string
from utilkit.config import Settings

logger = logging.getLogger(__name__)

MODULES = {"string": string, "number": number}
OUTPUT_FORMATS = ("text", "json", "yaml")

_TEXT_ANNOTATIONS = (str, object, Union[string.CaseFormat, str])


class CommandError(Exception):
    """Raised when a command line invocation cannot be resolved."""
    pass


def setup_logging(level: str = "WARNING") -> None:
    """
    Configure root logging for CLI use.

    Existing root handlers are cleared first so repeated calls do not
    duplicate output. Messages go to stderr, leaving stdout for results.
    """
    logging.root.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.addHandler(console_handler)


def resolve_function(module_name: str, function_name: str) -> Callable[..., Any]:
    """Look up a public helper function by module and name."""
    module = MODULES.get(module_name)
    if module is None:
        raise CommandError(f"Unknown module '{module_name}' (expected one of: {', '.join(MODULES)})")

    if function_name not in module.__all__:
        raise CommandError(f"Unknown function '{module_name}.{function_name}'")

    func = getattr(module, function_name)
    if not inspect.isfunction(func):
        raise CommandError(f"'{module_name}.{function_name}' is not a function")
    return func


def _parse_number(raw: str) -> number.Number:
    """Finite decimal numbers only; 'nan', 'inf' and '1_000' are rejected."""
    if not string.is_numeric(raw):
        raise CommandError(f"Expected a number, got '{raw}'")
    try:
        return int(raw)
    except ValueError:
        return float(raw)


def _parse_mapping(raw: str) -> Dict[str, Any]:
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise CommandError(f"Invalid YAML mapping '{raw}': {e}")
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise CommandError(f"Expected a YAML mapping, got '{raw}'")
    return {str(k): v for k, v in value.items()}


def _argument_parser(annotation: Any) -> Optional[Callable[[str], Any]]:
    """
    Pick the converter for a parameter annotation.

    Returns None for parameters the command line cannot fill, such as
    the rng source of number.random.
    """
    if annotation in (int, float, number.Number):
        return _parse_number
    if annotation in _TEXT_ANNOTATIONS:
        return str
    if get_origin(annotation) is collections.abc.Mapping:
        return _parse_mapping
    return None


def parse_arguments(module_name: str, function_name: str, raw_args: Sequence[str]) -> List[Any]:
    """
    Convert command line strings into call arguments for a helper.

    Each argument is converted by the annotated type of the parameter it
    fills: numbers are parsed, mappings are read as YAML, text is kept.
    Missing arguments are left for invoke() to report.
    """
    func = resolve_function(module_name, function_name)

    parsers: List[Callable[[str], Any]] = []
    for param in inspect.signature(func).parameters.values():
        parser = _argument_parser(param.annotation)
        if parser is None:
            break
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            parsers.extend([parser] * max(0, len(raw_args) - len(parsers)))
            break
        parsers.append(parser)

    if len(raw_args) > len(parsers):
        raise CommandError(
            f"Too many arguments for {module_name}.{function_name} "
            f"(expected at most {len(parsers)}, got {len(raw_args)})"
        )
    return [parse(raw) for parse, raw in zip(parsers, raw_args)]


def invoke(func: Callable[..., Any], args: Sequence[Any]) -> Any:
    """Call func after checking the arguments fit its signature."""
    try:
        inspect.signature(func).bind(*args)
    except TypeError as e:
        raise CommandError(f"Bad arguments for {func.__name__}: {e}")

    logger.debug("Calling %s.%s with %r", func.__module__, func.__name__, args)
    try:
        return func(*args)
    except ValueError as e:
        # convert_case/is_case reject unknown case format names
        raise CommandError(f"{func.__name__}: {e}")


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats (the NAN sentinel) with None for strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


def render_result(
    module_name: str,
    function_name: str,
    args: Sequence[Any],
    result: Any,
    output: str = "text",
) -> str:
    if output == "text":
        return str(result)

    document = {
        "module": module_name,
        "function": function_name,
        "args": list(args),
        "result": result,
    }
    if output == "json":
        return json.dumps(_json_safe(document), sort_keys=True, allow_nan=False)
    if output == "yaml":
        return yaml.safe_dump(document).rstrip("\n")
    raise CommandError(f"Unknown output format '{output}' (expected one of: {', '.join(OUTPUT_FORMATS)})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="utilkit",
        description="Call a utilkit string or number helper from the command line",
    )
    parser.add_argument("module", help="Helper module: string or number")
    parser.add_argument("function", help="Helper name, e.g. kebab_case or to_ordinal")
    parser.add_argument("args", nargs="*", help="Positional arguments for the helper")
    parser.add_argument(
        "--output",
        default=Settings.OUTPUT_FORMAT,
        help="Output format: text, json or yaml (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    options = parser.parse_args(argv)

    level = "DEBUG" if options.verbose or Settings.DEBUG else Settings.LOG_LEVEL
    setup_logging(level)

    try:
        func = resolve_function(options.module, options.function)
        call_args = parse_arguments(options.module, options.function, options.args)
        result = invoke(func, call_args)
        rendered = render_result(options.module, options.function, call_args, result, options.output)
    except CommandError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(rendered)
    return 0
