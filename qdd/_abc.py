"""Type aliases shared by the modules of `qdd`.

These interfaces are implemented by the modules:

- `qdd.bdd` (integer nodes)
- `qdd.autoref` (`Function` instances)
"""
# Copyright 2017 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import typing as _ty


Yes: _ty.TypeAlias = bool
Nat: _ty.TypeAlias = int
    # ```tla
    # Nat
    # ```
Cardinality: _ty.TypeAlias = Nat
Variable: _ty.TypeAlias = Nat
    # a variable is identified with its index,
    # which is also its level
Level: _ty.TypeAlias = Nat
Node: _ty.TypeAlias = Nat
    # 0 is FALSE, 1 is TRUE
Fork: _ty.TypeAlias = tuple[
    Level,
    Node | None,
    Node | None]
Assignment: _ty.TypeAlias = dict[
    Variable, bool]
OperatorSymbol: _ty.TypeAlias = _ty.Literal[
    'not', '~', '!',
    'and', '/\\', '&', '&&',
    'or', r'\/', '|', '||',
    '#', 'xor', '^',
    '=>', '->', 'implies',
    '<=>', '<->', 'equiv',
    'diff', '-']


class Operator(_ty.Protocol):
    """Boolean function as seen by the user."""

    def __invert__(self):
        """Negation `~ self`."""

    def __and__(self, other):
        r"""Conjunction `self /\ other`."""

    def __or__(self, other):
        r"""Disjunction `self \/ other`."""

    def implies(self, other):
        """Logical implication `self => other`."""

    def equiv(self, other):
        r"""Logical equivalence `self <=> other`.

        The result is *different* from `__eq__`:
        `equiv` returns a BDD as `Function`,
        whereas `__eq__` compares nodes and
        returns `bool`.
        """

    @property
    def level(self):
        """Level where this node is."""

    @property
    def var(self):
        """Variable at level where this node is."""

    @property
    def low(self):
        """Return "else" node."""

    @property
    def high(self):
        """Return "then" node."""

    @property
    def support(
            self
            ) -> set:
        """Return variables in support."""

    def restrict(self, var, value):
        return self.bdd.restrict(self, var, value)

    def count(self, nvars=None):
        return self.bdd.count(self, nvars)
