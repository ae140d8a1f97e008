"""
utilkit: small, stateless string and number helpers.

Two leaf modules, re-exported here under stable names:

    from utilkit import string, number

    string.kebab_case("helloWorld")   # "hello-world"
    number.to_ordinal(22)             # "22nd"

This package contains NO logic of its own.
All behaviour lives in the leaf modules.
"""

from . import number, string

__version__ = "0.1.0"

__all__ = ["number", "string"]
