"""Glyph abstract syntax tree. The set of node types is closed:

```
<expr> ::= "_"                              ; Literal, always 1
         | "(" <operator> <expr> <expr> ")" ; BinaryOp
         | "(" "%" <expr> <expr> <expr> ")" ; Conditional, only when "%" is directly followed by "("
         | "(" ":" <expr> <expr> <expr> ")" ; LetBinding: name, value, body
```

VariableRef has no surface syntax. It is part of the tree so that bound values can be referenced by trees built
programmatically.

Every node owns its children in `nodes`, in evaluation order. start/end delimit the source text the node was parsed
from, and are ignored when comparing nodes.
"""

from abc import ABC, abstractmethod


class GlyphTerm(ABC):
    """Superclass of every Glyph expression node."""

    def __init__(self, nodes=None, start=0, end=0):
        self.nodes = nodes if nodes is not None else []
        self.start = start
        self.end = end
        self._cls = type(self).__name__

    @property
    @abstractmethod
    def expr(self):
        """Canonical Glyph source of this node."""

    def display(self, indents=0):
        """Recursively displays the tree with readable format.

        Format:
        <GlyphTerm>(expr='<expr>', nodes=[
            <GlyphTerm>(expr='<expr>', nodes=[
                ...
                <GlyphTerm>(expr='<expr>')  # <-- if nodes is empty
            ])
        ])
        """
        result = f"{'    ' * indents}{self._cls}(expr='{self.expr}'"
        if self.nodes:
            result += ", nodes=["
            for node in self.nodes:
                result += "\n" + node.display(indents + 1) + ","
            result = result[:-1] + f"\n{'    ' * indents}]"
        return result + ")"

    def __repr__(self):
        return f"{self._cls}('{self.expr}')"

    def __str__(self):
        return self.expr

    def __eq__(self, other):
        return isinstance(other, type(self)) and self.expr == other.expr and self.nodes == other.nodes

    def __hash__(self):
        return hash((self._cls, self.expr))


class Literal(GlyphTerm):
    """The underscore, whose value is 1."""
    VALUE = 1

    @property
    def expr(self):
        return "_"


class VariableRef(GlyphTerm):
    """Reference to the value bound under an integer key by an enclosing LetBinding."""

    def __init__(self, key, start=0, end=0):
        super().__init__(start=start, end=end)
        self.key = key

    @property
    def expr(self):
        return f"${self.key}"

    def __repr__(self):
        return f"{self._cls}({self.key})"


class BinaryOp(GlyphTerm):
    OPERATORS = ["+", "-", "*", "^", "%"]

    def __init__(self, op, left, right, start=0, end=0):
        super().__init__([left, right], start, end)
        self.op = op

    @property
    def left(self):
        return self.nodes[0]

    @property
    def right(self):
        return self.nodes[1]

    @property
    def expr(self):
        return f"({self.op}{self.left.expr}{self.right.expr})"


class LetBinding(GlyphTerm):
    """Binds the value of `value` under the key obtained by evaluating `name`, for the duration of `body`."""

    def __init__(self, name, value, body, start=0, end=0):
        super().__init__([name, value, body], start, end)

    @property
    def name(self):
        return self.nodes[0]

    @property
    def value(self):
        return self.nodes[1]

    @property
    def body(self):
        return self.nodes[2]

    @property
    def expr(self):
        return "(:" + "".join(node.expr for node in self.nodes) + ")"


class Conditional(GlyphTerm):
    """Evaluates to `then` unless `condition` is 0, in which case it evaluates to `otherwise`."""

    def __init__(self, condition, then, otherwise, start=0, end=0):
        super().__init__([condition, then, otherwise], start, end)

    @property
    def condition(self):
        return self.nodes[0]

    @property
    def then(self):
        return self.nodes[1]

    @property
    def otherwise(self):
        return self.nodes[2]

    @property
    def expr(self):
        return "(%" + "".join(node.expr for node in self.nodes) + ")"
