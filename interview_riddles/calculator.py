"""Evaluating arithmetic expressions of numbers joined by + - * / without parentheses."""

import operator

_OPERATIONS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def tokenize(expression):
    """Split an expression into floats and single-character operator strings."""
    tokens = []
    number = ""
    for char in expression:
        if char.isdigit() or char == ".":
            number += char
        else:
            tokens.append(_to_number(number))
            tokens.append(char)
            number = ""
    if number:
        tokens.append(_to_number(number))
    return tokens


def _to_number(text):
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"expected a number, got {text!r}") from None


def _apply(left, right, op):
    try:
        function = _OPERATIONS[op]
    except KeyError:
        raise ValueError(f"unknown operator {op!r}") from None
    return function(left, right)


def _operations(expression):
    """Return the first number and the list of (operator, number) pairs after it."""
    tokens = tokenize(expression)
    if not tokens:
        return None, []
    if len(tokens) % 2 == 0:
        raise ValueError("expression must end with a number")
    operators = tokens[1::2]
    numbers = tokens[2::2]
    if any(op not in _OPERATIONS for op in operators):
        bad = next(op for op in operators if op not in _OPERATIONS)
        raise ValueError(f"unknown operator {bad!r}")
    return tokens[0], list(zip(operators, numbers))


def evaluate(expression):
    """Evaluate the expression with a value stack and an operator stack.

    Additions and subtractions followed by a multiplication or division are
    deferred and applied from the right once every term has been scanned.
    An empty expression evaluates to 0.0.
    """
    first, operations = _operations(expression)
    if first is None:
        return 0.0
    values = [first]
    deferred = []
    next_ops = [op for op, _ in operations[1:]] + [None]
    for (op, value), next_op in zip(operations, next_ops):
        if op in "+-" and next_op in ("*", "/"):
            values.append(value)
            deferred.append(op)
        else:
            values.append(_apply(values.pop(), value, op))
    while deferred:
        op = deferred.pop()
        right = values.pop()
        left = values.pop()
        values.append(_apply(left, right, op))
    return values[-1]


def evaluate_two_pass(expression):
    """Evaluate the expression in two sweeps: first * and /, then + and -, left to right.

    An empty expression evaluates to 0.0.
    """
    first, operations = _operations(expression)
    if first is None:
        return 0.0
    head = first
    terms = []
    for op, value in operations:
        if op in "*/":
            if terms:
                last_op, last_value = terms[-1]
                terms[-1] = (last_op, _apply(last_value, value, op))
            else:
                head = _apply(head, value, op)
        else:
            terms.append((op, value))
    result = head
    for op, value in terms:
        result = _apply(result, value, op)
    return result