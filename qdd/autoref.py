"""Wraps `qdd.bdd` to return handles that know their manager.

Each `Function` records the `BDD` that owns its node,
so that combining functions from different managers
raises `UnsupportedOperation` instead of returning
a node of the wrong pool.

For function docstrings, refer to `qdd.bdd`.
"""
# Copyright 2015 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import typing as _ty

import qdd._abc
import qdd.bdd as _bdd


_Yes: _ty.TypeAlias = qdd._abc.Yes
_Cardinality: _ty.TypeAlias = qdd._abc.Cardinality
_Variable: _ty.TypeAlias = qdd._abc.Variable
_Level: _ty.TypeAlias = qdd._abc.Level
_Ref: _ty.TypeAlias = _ty.Union['Function']
_MaybeRef: _ty.TypeAlias = '''(
    _Ref |
    None
    )'''
_Fork: _ty.TypeAlias = '''(
    tuple[
        _Level,
        _MaybeRef,
        _MaybeRef]
    )'''
_Assignment: _ty.TypeAlias = qdd._abc.Assignment


class BDD:
    """Shared reduced ordered binary decision diagram.

    It takes and returns `Function` instances.

    Attributes:

      - `var_num`: number of declared variables

    For docstrings, refer to methods of `qdd.bdd.BDD`,
    with the difference that `Function`s replace nodes
    as arguments and returned types.
    """

    def __init__(
            self,
            var_num:
                int=0):
        self._bdd = _bdd.BDD(var_num)

    def __eq__(
            self,
            other:
                'BDD'
            ) -> _Yes:
        if not isinstance(other, BDD):
            raise NotImplementedError
        return (self._bdd is other._bdd)

    def __hash__(
            self
            ) -> int:
        return id(self._bdd)

    def __len__(
            self
            ) -> _Cardinality:
        return len(self._bdd)

    def __contains__(
            self,
            u:
                _Ref
            ) -> _Yes:
        self._check_ref(u)
        return u.node in self._bdd

    def __str__(
            self
            ) -> str:
        return (
            'Binary decision diagram (`qdd.bdd.BDD` wrapper):\n'
            '------------------------\n'
            f'\t {self.var_num} BDD variables\n'
            f'\t {len(self)} nodes\n')

    @property
    def var_num(
            self
            ) -> _Cardinality:
        return self._bdd.var_num

    def _wrap(
            self,
            u:
                int
            ) -> _Ref:
        """Return reference to node `u`.

        @param u:
            node in `self._bdd`
        """
        if u not in self._bdd:
            raise ValueError(u)
        return Function(u, self)

    def _check_ref(
            self,
            u:
                _Ref
            ) -> None:
        """Raise `UnsupportedOperation` if `u` is not from `self`."""
        if not isinstance(u, Function):
            raise TypeError(
                f'expected `Function`, got {type(u)}')
        if u.bdd is not self:
            raise _bdd.UnsupportedOperation(
                'the function belongs to another manager: '
                f'{u.bdd!r} is not {self!r}')

    def configure(
            self,
            **kw
            ) -> dict[
                str,
                _ty.Any]:
        return self._bdd.configure(**kw)

    def statistics(
            self
            ) -> dict[
                str,
                _ty.Any]:
        return self._bdd.statistics()

    def declare(
            self,
            var_num:
                int
            ) -> None:
        self._bdd.declare(var_num)

    def succ(
            self,
            u:
                _Ref
            ) -> _Fork:
        self._check_ref(u)
        i, v, w = self._bdd.succ(u.node)
        def wrap(
                node:
                    int |
                    None
                ) -> _MaybeRef:
            match node:
                case None:
                    return None
                case int():
                    return self._wrap(node)
            raise AssertionError(node)
        return (i, wrap(v), wrap(w))

    def var(
            self,
            var:
                _Variable
            ) -> _Ref:
        r = self._bdd.var(var)
        return self._wrap(r)

    def nvar(
            self,
            var:
                _Variable
            ) -> _Ref:
        r = self._bdd.nvar(var)
        return self._wrap(r)

    def find_or_add(
            self,
            var:
                _Variable,
            low:
                _Ref,
            high:
                _Ref
            ) -> _Ref:
        self._check_ref(low)
        self._check_ref(high)
        r = self._bdd.find_or_add(var, low.node, high.node)
        return self._wrap(r)

    def apply(
            self,
            op:
                qdd._abc.OperatorSymbol,
            u:
                _Ref,
            v:
                _MaybeRef=None
            ) -> _Ref:
        self._check_ref(u)
        if v is None:
            r = self._bdd.apply(op, u.node)
        else:
            self._check_ref(v)
            r = self._bdd.apply(op, u.node, v.node)
        return self._wrap(r)

    def restrict(
            self,
            u:
                _Ref,
            var:
                _Variable,
            value:
                _Yes
            ) -> _Ref:
        self._check_ref(u)
        r = self._bdd.restrict(u.node, var, value)
        return self._wrap(r)

    def cofactor(
            self,
            u:
                _Ref,
            values:
                _Assignment
            ) -> _Ref:
        self._check_ref(u)
        r = self._bdd.cofactor(u.node, values)
        return self._wrap(r)

    def support(
            self,
            u:
                _Ref
            ) -> set[_Variable]:
        self._check_ref(u)
        return self._bdd.support(u.node)

    def count(
            self,
            u:
                _Ref,
            nvars:
                _Cardinality |
                None=None
            ) -> _Cardinality:
        self._check_ref(u)
        return self._bdd.count(u.node, nvars)

    def pick_iter(
            self,
            u:
                _Ref,
            care_vars:
                set[_Variable] |
                None=None
            ) -> _abc.Iterable[
                _Assignment]:
        self._check_ref(u)
        return self._bdd.pick_iter(u.node, care_vars)

    def pick(
            self,
            u:
                _Ref,
            care_vars:
                set[_Variable] |
                None=None
            ) -> _Assignment | None:
        return next(self.pick_iter(u, care_vars), None)

    def to_expr(
            self,
            u:
                _Ref
            ) -> str:
        self._check_ref(u)
        return self._bdd.to_expr(u.node)

    def dump(
            self,
            filename:
                str,
            roots:
                list[_Ref] |
                None=None,
            **kw
            ) -> None:
        if roots is not None:
            for u in roots:
                self._check_ref(u)
            roots = [u.node for u in roots]
        self._bdd.dump(filename, roots, **kw)

    def assert_consistent(
            self
            ) -> None:
        self._bdd.assert_consistent()

    @property
    def false(
            self
            ) -> _Ref:
        return self._wrap(self._bdd.false)

    @property
    def true(
            self
            ) -> _Ref:
        return self._wrap(self._bdd.true)


class Function(qdd._abc.Operator):
    r"""Convenience wrapper for nodes returned by `BDD`.

    ```python
    import qdd.autoref

    bdd = qdd.autoref.BDD(2)
    x = bdd.var(0)
    y = bdd.var(1)
    u = x & ~ y
    ```

    Attributes:

    - `node`: `int` that identifies the node
    - `bdd`: `qdd.autoref.BDD` instance that node belongs to
    - `manager`: `qdd.bdd.BDD` instance that node belongs to

    Operations are valid only between functions with
    the same `BDD` in `Function.bdd`. Otherwise,
    `qdd.bdd.UnsupportedOperation` is raised.
    """

    def __init__(
            self,
            node:
                int,
            bdd:
                BDD
            ) -> None:
        if node not in bdd._bdd:
            raise ValueError(node)
        self.bdd = bdd
        self.manager = bdd._bdd
        self.node = node

    def __hash__(
            self
            ) -> int:
        return self.node

    def __repr__(
            self
            ) -> str:
        return f'Function({self.node})'

    def to_expr(
            self
            ) -> str:
        """Return Boolean expression of function."""
        return self.manager.to_expr(self.node)

    def __int__(
            self
            ) -> int:
        return self.node

    def __len__(
            self
            ) -> _Cardinality:
        return len(self.manager.descendants([self.node]))

    @property
    def dag_size(
            self
            ) -> _Cardinality:
        return len(self)

    def __eq__(
            self,
            other
            ) -> _Yes:
        if other is None:
            return False
        if not isinstance(other, Function):
            raise NotImplementedError
        if self.bdd is not other.bdd:
            raise _bdd.UnsupportedOperation(
                (self.bdd, other.bdd))
        return self.node == other.node

    def __ne__(
            self,
            other
            ) -> _Yes:
        if other is None:
            return True
        return not (self == other)

    def __invert__(
            self
            ) -> _Ref:
        return self._apply('not', other=None)

    def __and__(
            self,
            other:
                _Ref
            ) -> _Ref:
        return self._apply('and', other)

    def __or__(
            self,
            other:
                _Ref
            ) -> _Ref:
        return self._apply('or', other)

    def __xor__(
            self,
            other:
                _Ref
            ) -> _Ref:
        return self._apply('xor', other)

    def implies(
            self,
            other:
                _Ref
            ) -> _Ref:
        return self._apply('implies', other)

    def equiv(
            self,
            other:
                _Ref
            ) -> _Ref:
        return self._apply('equiv', other)

    def _apply(
            self,
            op:
                qdd._abc.OperatorSymbol,
            other:
                _MaybeRef
            ) -> _Ref:
        """Return result of operation `op` with `other`."""
        # unary op ?
        if other is None:
            u = self.manager.apply(op, self.node)
        else:
            if not isinstance(other, Function):
                raise TypeError(
                    f'expected `Function`, got {type(other)}')
            if self.bdd is not other.bdd:
                raise _bdd.UnsupportedOperation(
                    (self.bdd, other.bdd))
            u = self.manager.apply(op, self.node, other.node)
        return Function(u, self.bdd)

    @property
    def is_false(
            self
            ) -> _Yes:
        return self.manager.is_false(self.node)

    @property
    def is_true(
            self
            ) -> _Yes:
        return self.manager.is_true(self.node)

    @property
    def level(
            self
            ) -> _Level:
        i, _, _ = self.manager._succ[self.node]
        return i

    @property
    def var(
            self
            ) -> (
                _Variable |
                None):
        i, low, _ = self.manager._succ[self.node]
        if low is None:
            return None
        return i

    @property
    def low(
            self
            ) -> '''(
                _Ref |
                None
                )''':
        _, v, _ = self.manager._succ[self.node]
        if v is None:
            return None
        return Function(v, self.bdd)

    @property
    def high(
            self
            ) -> '''(
                _Ref |
                None
                )''':
        _, _, w = self.manager._succ[self.node]
        if w is None:
            return None
        return Function(w, self.bdd)

    @property
    def support(
            self
            ) -> set[_Variable]:
        return self.manager.support(self.node)
