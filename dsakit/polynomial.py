"""Polynomials as ordered term lists: combining, multiplying and formatting."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

__all__ = ["Term", "combine_terms", "multiply", "format_terms"]


class Term(NamedTuple):
    """One term ``coefficient * x**power``."""

    coefficient: int
    power: int


def _terms(items: Iterable[Term | tuple[int, int]]) -> list[Term]:
    return [Term(*item) for item in items]


def combine_terms(terms: Iterable[Term | tuple[int, int]]) -> list[Term]:
    """Add together terms of equal power.

    Each power keeps the place of its first occurrence; zero coefficients stay.
    """
    totals: dict[int, int] = {}
    for coefficient, power in _terms(terms):
        totals[power] = totals.get(power, 0) + coefficient
    return [Term(coefficient, power) for power, coefficient in totals.items()]


def multiply(
    first: Iterable[Term | tuple[int, int]], second: Iterable[Term | tuple[int, int]]
) -> list[Term]:
    """Multiply two polynomials term by term and combine equal powers."""
    left = _terms(first)
    right = _terms(second)
    products = (
        Term(a.coefficient * b.coefficient, a.power + b.power)
        for a in left
        for b in right
    )
    return combine_terms(products)


def format_terms(terms: Iterable[Term | tuple[int, int]]) -> str:
    """Render terms as ``45x^4+7x^3-8``; a power-0 term shows its coefficient alone."""
    items = _terms(terms)
    if not items:
        return "0"
    parts = []
    for position, (coefficient, power) in enumerate(items):
        if position and coefficient >= 0:
            parts.append("+")
        parts.append(str(coefficient) if power == 0 else f"{coefficient}x^{power}")
    return "".join(parts)