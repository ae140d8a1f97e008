"""
Number Utilities

Pure numeric predicates, aggregates, number-theory helpers and formatting.

Covers:
    - Parity and sign predicates
    - Aggregates (max, min, sum, average, median)
    - factorial, fibonacci, primality, divisors, prime factors
    - Ordinal and digit-by-digit word formatting
    - Random numbers, modulo, clamping and range checks

ERROR POLICY:
    Nothing here raises for numeric input. A result that is undefined
    for its input (empty aggregate, negative factorial, zero modulus)
    is the NAN sentinel, and NAN arguments propagate through max/min.

NAMING:
    max, min and sum intentionally reuse builtin names; call them
    through the module (number.max(...)). The builtins stay reachable
    through the `builtins` module below.
"""

import builtins
import logging
import math
import random as _random
import threading
from typing import List, Optional, Protocol, Union

logger = logging.getLogger(__name__)

Number = Union[int, float]

NAN = float("nan")

_DIGIT_WORDS = [
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
]

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


class RandomSource(Protocol):
    """Anything with a random() -> float in [0, 1), e.g. random.Random."""

    def random(self) -> float:
        ...


_default_rng = _random.Random()
_default_rng_lock = threading.Lock()


def _is_nan(n: Number) -> bool:
    return isinstance(n, float) and math.isnan(n)


def _is_integral(n: Number) -> bool:
    return isinstance(n, int) or (math.isfinite(n) and n == int(n))


def is_even(n: Number) -> bool:
    return n % 2 == 0


def is_odd(n: Number) -> bool:
    return not is_even(n)


def is_positive(n: Number) -> bool:
    return n > 0


def is_negative(n: Number) -> bool:
    return n < 0


def is_zero(n: Number) -> bool:
    return n == 0


def max(*numbers: Number) -> Number:
    """Largest argument; NAN when called with none or when any is NaN."""
    if not numbers:
        logger.debug("max() called with no arguments")
        return NAN
    if any(_is_nan(n) for n in numbers):
        return NAN
    return builtins.max(numbers)


def min(*numbers: Number) -> Number:
    """Smallest argument; NAN when called with none or when any is NaN."""
    if not numbers:
        logger.debug("min() called with no arguments")
        return NAN
    if any(_is_nan(n) for n in numbers):
        return NAN
    return builtins.min(numbers)


def sum(*numbers: Number) -> Number:
    total: Number = 0
    for n in numbers:
        total += n
    return total


def average(*numbers: Number) -> float:
    if not numbers:
        logger.debug("average() called with no arguments")
        return NAN
    return sum(*numbers) / len(numbers)


def median(*numbers: Number) -> Number:
    """
    Middle value of the arguments.

    Works on a sorted copy, so a caller unpacking its own list
    (median(*values)) never sees it reordered.

    Examples:
        median(2, 3, 4)     -> 3
        median(2, 3, 4, 1)  -> 2.5
    """
    if not numbers:
        logger.debug("median() called with no arguments")
        return NAN
    ordered = sorted(numbers)
    middle = len(ordered) // 2
    if is_even(len(ordered)):
        return average(ordered[middle - 1], ordered[middle])
    return ordered[middle]


def factorial(n: Number) -> Number:
    """
    n! computed iteratively as an exact int.

    factorial(0) == 1. Negative or non-integral n gives NAN.
    Results are unbounded Python ints, so there is no overflow and no
    recursion limit; very large n is only limited by time.
    """
    if n < 0 or not _is_integral(n):
        logger.debug("factorial(%r) is undefined", n)
        return NAN
    result = 1
    for i in range(2, int(n) + 1):
        result *= i
    return result


def fibonacci(n: Number) -> Number:
    """
    n-th Fibonacci number, 0-indexed: fibonacci(0) == 0, fibonacci(1) == 1.

    Iterative, exact int. Negative or non-integral n gives NAN.
    """
    if n < 0 or not _is_integral(n):
        logger.debug("fibonacci(%r) is undefined", n)
        return NAN
    previous, current = 0, 1
    for _ in range(int(n)):
        previous, current = current, previous + current
    return previous


def is_prime(n: Number) -> bool:
    """Trial division up to sqrt(n). False below 2 and for non-integers."""
    if n < 2 or not _is_integral(n):
        return False
    n = int(n)
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def get_divisors(n: Number) -> List[int]:
    """
    Proper divisors of n in ascending order (n itself excluded).

    Example:
        get_divisors(6) -> [1, 2, 3]
    """
    divisors = []
    if isinstance(n, float) and not math.isfinite(n):
        return divisors
    for i in range(1, math.floor(n / 2) + 1):
        if n % i == 0:
            divisors.append(i)
    return divisors


def is_perfect(n: Number) -> bool:
    """
    True if n equals the sum of its proper divisors.

    Note that 0 has no proper divisors and so compares equal to the
    empty sum: is_perfect(0) is True.
    """
    return n == sum(*get_divisors(n))


def get_prime_factors(n: Number) -> List[int]:
    """
    Prime factorization with multiplicity, ascending.

    Example:
        get_prime_factors(12) -> [2, 2, 3]

    Returns [] for n < 2 and for non-integers.
    """
    factors = []
    if n < 2 or not _is_integral(n):
        return factors
    remaining = int(n)
    i = 2
    while i * i <= remaining:
        while remaining % i == 0:
            factors.append(i)
            remaining //= i
        i += 1
    if remaining > 1:
        factors.append(remaining)
    return factors


def to_ordinal(n: int) -> str:
    """
    Append the English ordinal suffix.

    11, 12 and 13 (mod 100) always take "th"; otherwise the last digit
    picks st/nd/rd, falling back to "th". The suffix is chosen from
    abs(n), so to_ordinal(-1) == "-1st". Non-finite input takes "th".
    """
    if isinstance(n, float) and not math.isfinite(n):
        return f"{n}th"
    magnitude = abs(int(n))
    if 11 <= magnitude % 100 <= 13:
        suffix = "th"
    else:
        suffix = _ORDINAL_SUFFIXES.get(magnitude % 10, "th")
    return f"{n}{suffix}"


def to_words(n: Number) -> str:
    """
    Name each decimal digit of n independently.

    Example:
        to_words(123) -> "one two three"

    Characters with no digit name (the minus sign, a decimal point)
    are dropped: to_words(-12) == "one two".
    """
    return " ".join(_DIGIT_WORDS[int(ch)] for ch in str(n) if ch in "0123456789")


def random(lo: Number = 0, hi: Number = 1, rng: Optional[RandomSource] = None) -> float:
    """
    Uniform float in [lo, hi).

    Pass rng (e.g. random.Random(42)) for a deterministic source. Without
    it a shared module-level generator is used under a lock, which makes
    concurrent calls from several threads safe.
    """
    if rng is None:
        with _default_rng_lock:
            sample = _default_rng.random()
    else:
        sample = rng.random()
    return sample * (hi - lo) + lo


def random_int(lo: Number = 0, hi: Number = 1, rng: Optional[RandomSource] = None) -> int:
    """floor(random(lo, hi)). With the defaults this is always 0."""
    return math.floor(random(lo, hi, rng))


def mod(n: Number, m: Number) -> Number:
    """
    Mathematical modulo: the result takes the sign of m.

    mod(-5, 3) == 1. A zero modulus gives NAN.
    """
    if m == 0:
        logger.debug("mod(%r, 0) is undefined", n)
        return NAN
    return ((n % m) + m) % m


def clamp(n: Number, lo: Number, hi: Number) -> Number:
    return min(max(n, lo), hi)


def in_range(n: Number, start: Number, end: Number) -> bool:
    """Half-open interval check: start <= n < end."""
    return start <= n < end


__all__ = [
    "NAN",
    "RandomSource",
    "is_even",
    "is_odd",
    "is_positive",
    "is_negative",
    "is_zero",
    "max",
    "min",
    "sum",
    "average",
    "median",
    "factorial",
    "fibonacci",
    "is_prime",
    "get_divisors",
    "is_perfect",
    "get_prime_factors",
    "to_ordinal",
    "to_words",
    "random",
    "random_int",
    "mod",
    "clamp",
    "in_range",
]
