"""Evaluation of Glyph syntax trees to integers.

Environments are plain dicts of binding key: value. A LetBinding never mutates the environment it was given: the body
is evaluated under a copy that holds the new binding, so inner bindings never leak into the enclosing scope.
"""

from glyph.lang.error import DivisionByZero, UnboundVariable, UnknownNode, UnknownOperator
from glyph.lang.tree import BinaryOp, Conditional, LetBinding, Literal, VariableRef


def power(base, exponent):
    """base ** exponent by repeated multiplication. A non-positive exponent means no multiplication, so it yields 1."""
    result = 1
    for __ in range(exponent):
        result *= base
    return result


def remainder(dividend, divisor):
    """Remainder of truncating division: the result takes the sign of the dividend (-7 % 2 == -1)."""
    result = abs(dividend) % abs(divisor)
    return -result if dividend < 0 else result


class Evaluator:
    """Evaluates a syntax tree by structural recursion. source is only used to point error messages at the offending
    part of the program.
    """
    OPERATIONS = {
        "+": lambda left, right: left + right,
        "-": lambda left, right: left - right,
        "*": lambda left, right: left * right,
        "^": power,
        "%": remainder,
    }

    def __init__(self, source=""):
        self.source = source

    def evaluate(self, node, env=None):
        """Returns the integer value of node under env (empty if not given)."""
        if env is None:
            env = {}

        if isinstance(node, Literal):
            return Literal.VALUE

        elif isinstance(node, VariableRef):
            if node.key not in env:
                raise UnboundVariable(node.key)
            return env[node.key]

        elif isinstance(node, BinaryOp):
            return self._evaluate_binary(node, env)

        elif isinstance(node, LetBinding):
            value = self.evaluate(node.value, env)
            key = self.evaluate(node.name, env)  # name is evaluated before the binding exists
            return self.evaluate(node.body, {**env, key: value})

        elif isinstance(node, Conditional):
            if self.evaluate(node.condition, env) == 0:
                return self.evaluate(node.otherwise, env)
            return self.evaluate(node.then, env)

        raise UnknownNode(node)

    def _evaluate_binary(self, node, env):
        # both operands are always evaluated, left first
        left = self.evaluate(node.left, env)
        right = self.evaluate(node.right, env)

        if node.op not in Evaluator.OPERATIONS:
            raise UnknownOperator(node.op)

        if node.op == "%" and right == 0:
            raise DivisionByZero(self.source, node.start, node.end if node.end > node.start else -1)

        return Evaluator.OPERATIONS[node.op](left, right)
