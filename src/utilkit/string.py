"""
String Utilities

Pure text transforms and predicates over a single string value.

Covers:
    - Prefix/suffix removal
    - Case conversion (camel, pascal, kebab, snake, constant, title)
    - Whitespace normalization and character filtering
    - Masking and HTML/XSS escaping
    - Positional and named template substitution
    - Predicates (palindrome, anagram, numeric, case-format checks)

ARCHITECTURAL RULE:
    Every function here is total over str input.
    Nothing raises, nothing mutates, nothing is cached.
    Case handling is ASCII-oriented: only [a-z]/[A-Z] boundaries count.
"""

import math
import re
from enum import Enum
from typing import Mapping, Union


_HYPHEN_LOWER_RE = re.compile(r"-([a-z])")
_LOWER_UPPER_RE = re.compile(r"([a-z])([A-Z])")
_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALPHA_NUMERIC_RE = re.compile(r"[^a-zA-Z0-9]")
_NON_NUMERIC_RE = re.compile(r"[^0-9]")
_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_INDEX_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")
_NAMED_PLACEHOLDER_RE = re.compile(r"\{([^{}]*)\}")
_ALPHA_RE = re.compile(r"[a-zA-Z]+")
_ALPHA_NUMERIC_RE = re.compile(r"[a-zA-Z0-9]+")


def remove_prefix(s: str, prefix: str) -> str:
    """
    Strip a leading prefix.

    Example:
        remove_prefix("hello world", "hello ") -> "world"
    """
    if s.startswith(prefix):
        return s[len(prefix):]
    return s


def remove_suffix(s: str, suffix: str) -> str:
    """
    Strip a trailing suffix.

    Example:
        remove_suffix("hello world", " world") -> "hello"

    An empty suffix leaves the string unchanged.
    """
    if s.endswith(suffix):
        return s[:len(s) - len(suffix)]
    return s


def capitalize(s: str) -> str:
    """Upper-case the first character, leave the rest alone."""
    return s[:1].upper() + s[1:]


def camel_case(s: str) -> str:
    """
    Convert kebab-case to camelCase.

    Only a hyphen followed by a lowercase ASCII letter is rewritten:
        camel_case("hello-world") -> "helloWorld"
        camel_case("hello-World") -> "hello-World"
    """
    return _HYPHEN_LOWER_RE.sub(lambda m: m.group(1).upper(), s)


def kebab_case(s: str) -> str:
    """
    Convert camelCase/PascalCase to kebab-case.

    Example:
        kebab_case("helloWorld") -> "hello-world"
    """
    return _LOWER_UPPER_RE.sub(r"\1-\2", s).lower()


def snake_case(s: str) -> str:
    return kebab_case(s).replace("-", "_")


def pascal_case(s: str) -> str:
    return capitalize(camel_case(s))


def constant_case(s: str) -> str:
    return snake_case(s).upper()


def title_case(s: str) -> str:
    """
    Capitalize every space-separated word.

    Splits on single spaces, so runs of spaces are preserved as-is.
    """
    return " ".join(capitalize(word) for word in s.split(" "))


def reverse(s: str) -> str:
    """Reverse by code point (combining sequences are not kept together)."""
    return s[::-1]


def truncate(s: str, max_length: int, suffix: str = "...") -> str:
    """
    Shorten s to max_length characters, ending with suffix.

    The kept prefix is max_length - len(suffix) characters, clamped at 0,
    so a max_length shorter than the suffix yields the bare suffix:
        truncate("hello world", 5) -> "he..."
        truncate("hello world", 2) -> "..."
    """
    if len(s) > max_length:
        keep = max(0, max_length - len(suffix))
        return s[:keep] + suffix
    return s


def normalize_whitespace(s: str) -> str:
    return _WHITESPACE_RE.sub(" ", s)


def remove_whitespace(s: str) -> str:
    return _WHITESPACE_RE.sub("", s)


def remove_extra_whitespace(s: str) -> str:
    return _WHITESPACE_RE.sub(" ", s.strip())


def remove_non_alpha_numeric(s: str) -> str:
    return _NON_ALPHA_NUMERIC_RE.sub("", s)


def remove_non_numeric(s: str) -> str:
    return _NON_NUMERIC_RE.sub("", s)


def remove_non_alpha(s: str) -> str:
    return _NON_ALPHA_RE.sub("", s)


def mask(s: str, mask_char: str = "*") -> str:
    """Replace every character (newlines included) with mask_char."""
    return mask_char * len(s)


def xss_safe(s: str) -> str:
    """Escape angle brackets only. Ampersands and quotes pass through."""
    return s.replace("<", "&lt;").replace(">", "&gt;")


def html_safe(s: str) -> str:
    """
    Escape &, < and > for HTML text content.

    The ampersand goes first; otherwise the entities produced for < and >
    would be escaped a second time.
    """
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def remove_html_tags(s: str) -> str:
    """
    Remove every <...> span.

    Matching is minimal (stops at the first '>'), and a '<' with no
    closing '>' is left in place.
    """
    return _HTML_TAG_RE.sub("", s)


def format(s: str, *args: object) -> str:
    """
    Substitute positional {0}, {1}, ... placeholders.

    Example:
        format("hello {0}", "world") -> "hello world"
        format("hello {1}", "world") -> "hello "

    Missing indices and empty values substitute "". Non-numeric
    placeholders such as {name} are left untouched.
    """
    def _replace(match: "re.Match[str]") -> str:
        index = int(match.group(1))
        if index < len(args) and args[index] is not None:
            return str(args[index])
        return ""

    return _INDEX_PLACEHOLDER_RE.sub(_replace, s)


def format_named(s: str, mapping: Mapping[str, object]) -> str:
    """
    Substitute named {key} placeholders from mapping.

    Example:
        format_named("hello {name}", {"name": "world"}) -> "hello world"

    Keys absent from mapping (or mapped to None) substitute "".
    """
    def _replace(match: "re.Match[str]") -> str:
        value = mapping.get(match.group(1))
        if value is None:
            return ""
        return str(value)

    return _NAMED_PLACEHOLDER_RE.sub(_replace, s)


def total_occurrences(s: str, sub: str) -> int:
    """Count non-overlapping occurrences of sub. An empty sub counts 0."""
    if not sub:
        return 0
    return s.count(sub)


def is_palindrome(s: str) -> bool:
    """Exact comparison: case- and whitespace-sensitive."""
    return s == reverse(s)


def is_anagram(a: str, b: str) -> bool:
    return sorted(a) == sorted(b)


def is_numeric(s: str) -> bool:
    """
    True if s reads as a finite decimal number.

    Accepts surrounding whitespace, a sign, a fractional part and an
    exponent ("  -1.5e3 "). Rejects empty/blank strings, "inf"/"nan",
    and digit-group underscores ("1_000").
    """
    if "_" in s:
        return False
    try:
        value = float(s)
    except ValueError:
        return False
    return math.isfinite(value)


def is_alpha(s: str) -> bool:
    return _ALPHA_RE.fullmatch(s) is not None


def is_alpha_numeric(s: str) -> bool:
    return _ALPHA_NUMERIC_RE.fullmatch(s) is not None


def is_lower_case(s: str) -> bool:
    return s == s.lower()


def is_upper_case(s: str) -> bool:
    return s == s.upper()


def is_title_case(s: str) -> bool:
    return s == title_case(s)


def is_camel_case(s: str) -> bool:
    return s == camel_case(s)


def is_pascal_case(s: str) -> bool:
    return s == pascal_case(s)


def is_kebab_case(s: str) -> bool:
    return s == kebab_case(s)


def is_snake_case(s: str) -> bool:
    return s == snake_case(s)


def is_constant_case(s: str) -> bool:
    return s == constant_case(s)


class CaseFormat(Enum):
    """Case formats understood by convert_case and is_case."""
    CAMEL = "camel"
    PASCAL = "pascal"
    KEBAB = "kebab"
    SNAKE = "snake"
    CONSTANT = "constant"
    TITLE = "title"


_CONVERTERS = {
    CaseFormat.CAMEL: camel_case,
    CaseFormat.PASCAL: pascal_case,
    CaseFormat.KEBAB: kebab_case,
    CaseFormat.SNAKE: snake_case,
    CaseFormat.CONSTANT: constant_case,
    CaseFormat.TITLE: title_case,
}


def convert_case(s: str, fmt: Union[CaseFormat, str]) -> str:
    """
    Convert s to the given case format.

    fmt may be a CaseFormat or its value ("camel", "snake", ...).
    An unknown value raises ValueError.
    """
    return _CONVERTERS[CaseFormat(fmt)](s)


def is_case(s: str, fmt: Union[CaseFormat, str]) -> bool:
    """True if s is already in the given case format."""
    return s == convert_case(s, fmt)


__all__ = [
    "remove_prefix",
    "remove_suffix",
    "capitalize",
    "camel_case",
    "kebab_case",
    "snake_case",
    "pascal_case",
    "constant_case",
    "title_case",
    "reverse",
    "truncate",
    "normalize_whitespace",
    "remove_whitespace",
    "remove_extra_whitespace",
    "remove_non_alpha_numeric",
    "remove_non_numeric",
    "remove_non_alpha",
    "mask",
    "xss_safe",
    "html_safe",
    "remove_html_tags",
    "format",
    "format_named",
    "total_occurrences",
    "is_palindrome",
    "is_anagram",
    "is_numeric",
    "is_alpha",
    "is_alpha_numeric",
    "is_lower_case",
    "is_upper_case",
    "is_title_case",
    "is_camel_case",
    "is_pascal_case",
    "is_kebab_case",
    "is_snake_case",
    "is_constant_case",
    "CaseFormat",
    "convert_case",
    "is_case",
]
