#!/usr/bin/env python3
"""
Demo: a quick tour of the utilkit string and number helpers.
"""

import random

from utilkit import number, string


def main():
    print("=" * 80)
    print("STRING HELPERS")
    print("=" * 80)

    word = "helloBigWorld"
    for fmt in string.CaseFormat:
        print(f"  {fmt.value:<10} {string.convert_case(word, fmt)}")

    print(f"\n  truncate:     {string.truncate('hello world', 8)}")
    print(f"  html_safe:    {string.html_safe('Tom & <Jerry>')}")
    print(f"  format:       {string.format('{0} meets {1}', 'Ada', 'Alan')}")
    print(f"  format_named: {string.format_named('hi {name}', {'name': 'Grace'})}")
    print(f"  is_anagram:   {string.is_anagram('listen', 'silent')}")

    print("\n" + "=" * 80)
    print("NUMBER HELPERS")
    print("=" * 80)

    values = [7, 3, 9, 1, 4]
    print(f"  values:       {values}")
    print(f"  median:       {number.median(*values)}")
    print(f"  average:      {number.average(*values)}")
    print(f"  primes:       {[n for n in range(30) if number.is_prime(n)]}")
    print(f"  perfect:      {[n for n in range(1, 500) if number.is_perfect(n)]}")
    print(f"  factors(360): {number.get_prime_factors(360)}")
    print(f"  ordinals:     {', '.join(number.to_ordinal(n) for n in (1, 2, 3, 11, 22, 103))}")
    print(f"  to_words:     {number.to_words(2026)}")

    rng = random.Random(42)
    print(f"  dice (seeded): {[number.random_int(1, 7, rng) for _ in range(5)]}")
    print("=" * 80)


if __name__ == "__main__":
    main()
