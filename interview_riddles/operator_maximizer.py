"""Choosing + and * with parentheses between numbers to make the result as large as possible.

Numbers below 2 are better added to a neighbour than multiplied, so the
values are grouped into parenthesised sums that are then multiplied:
{3, 4, 5, 1} becomes (3.0)*(4.0)*(5.0+1.0) = 72.
"""

import math
from itertools import groupby

_THRESHOLD = 2


class Expression:
    """A parenthesised sum over the values ``values[start:end]``."""

    def __init__(self, values, start, end):
        if not 0 <= start <= end <= len(values):
            raise ValueError(f"invalid range [{start}, {end}) for {len(values)} values")
        self.values = values
        self.start = start
        self.end = end

    def __len__(self):
        return self.end - self.start

    def __repr__(self):
        return f"Expression({self})"

    def sum(self):
        """Return the sum of the values in the expression."""
        return sum(self.values[self.start:self.end])

    def __str__(self):
        terms = "+".join(f"{value:.1f}" for value in self.values[self.start:self.end])
        return f"({terms})"


class MaxFinder:
    """Finds the grouping of the values whose product of sums is largest."""

    def __init__(self, values):
        self._values = [float(value) for value in values]

    def _small_groups(self, indices):
        """Split a run of values below the threshold into sums that reach it."""
        group_start = indices[0]
        total = 0
        for index in indices:
            total += self._values[index]
            if total >= _THRESHOLD:
                yield Expression(self._values, group_start, index + 1)
                total = 0
                group_start = index + 1
        if group_start <= indices[-1]:
            yield Expression(self._values, group_start, indices[-1] + 1)

    def _initial_expressions(self):
        expressions = []
        runs = groupby(range(len(self._values)), key=lambda k: self._values[k] >= _THRESHOLD)
        for large, run in runs:
            indices = list(run)
            if large:
                expressions.extend(Expression(self._values, k, k + 1) for k in indices)
            else:
                expressions.extend(self._small_groups(indices))
        return expressions

    @staticmethod
    def _distribute_small(expressions):
        """Hand the values of every sum below the threshold to its smaller neighbour."""
        i = 0
        while i < len(expressions):
            expr = expressions[i]
            if expr.sum() >= _THRESHOLD or len(expressions) == 1:
                i += 1
                continue
            while len(expr) > 0:
                prev_sum = expressions[i - 1].sum() if i > 0 else math.inf
                next_sum = expressions[i + 1].sum() if i + 1 < len(expressions) else math.inf
                if prev_sum <= next_sum:
                    expressions[i - 1].end = expr.start + 1
                    expr.start += 1
                else:
                    expressions[i + 1].start = expr.end - 1
                    expr.end -= 1
            del expressions[i]

    @staticmethod
    def _balance_backwards(expressions):
        """Move leading values of large sums to the previous sum to even them out."""
        for j in range(len(expressions) - 1, 0, -1):
            current = expressions[j]
            previous = expressions[j - 1]
            moves = 0
            while len(current) > 1 and current.sum() > previous.sum():
                current.start += 1
                if current.sum() >= _THRESHOLD:
                    previous.end += 1
                    moves += 1
                else:
                    current.start -= 1
                    break
            if moves:
                delta_after = abs(previous.sum() - current.sum())
                current.start -= 1
                previous.end -= 1
                delta_before = abs(previous.sum() - current.sum())
                if delta_after < delta_before:
                    current.start += 1
                    previous.end += 1

    def find_max_operators(self):
        """Return the chosen expression as text and its value.

        An empty input gives an empty text and the value 0.
        """
        expressions = self._initial_expressions()
        self._distribute_small(expressions)
        self._balance_backwards(expressions)
        text = "*".join(str(expr) for expr in expressions)
        value = math.prod(expr.sum() for expr in expressions) if expressions else 0.0
        return text, value