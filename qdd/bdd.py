"""Reduced ordered binary decision diagrams.

Nodes are integers in a shared pool that is owned by
a `BDD` manager. Two terminal nodes exist:
`0` (FALSE) and `1` (TRUE). Variables are integers,
and the level of each variable equals its index.


References
==========

Randal E. Bryant
    "Graph-based algorithms for Boolean function manipulation"
    IEEE Transactions on Computers
    Volume C-35, No. 8, August, 1986, pages 677--690

Karl S. Brace, Richard L. Rudell, Randal E. Bryant
    "Efficient implementation of a BDD package"
    27th ACM/IEEE Design Automation Conference (DAC), 1990
    pages 40--45

Henrik R. Andersen
    "An introduction to binary decision diagrams"
    Lecture notes for "Efficient Algorithms and Programs", 1999
    The IT University of Copenhagen
"""
# Copyright 2014 by California Institute of Technology
# All rights reserved. Licensed under BSD-3.
#
import collections.abc as _abc
import logging
import sys
import typing as _ty

import qdd._abc
# inline:
# import networkx
# import pydot


logger = logging.getLogger(__name__)
FALSE: _ty.Final = 0
TRUE: _ty.Final = 1


_Node: _ty.TypeAlias = qdd._abc.Node
_Variable: _ty.TypeAlias = qdd._abc.Variable
_Fork: _ty.TypeAlias = qdd._abc.Fork
_Assignment: _ty.TypeAlias = qdd._abc.Assignment
# operator symbol -> operator name
_OPERATORS: _ty.Final = {
    'not': 'not', '~': 'not', '!': 'not',
    'and': 'and', '/\\': 'and', '&': 'and', '&&': 'and',
    'or': 'or', r'\/': 'or', '|': 'or', '||': 'or',
    'xor': 'xor', '#': 'xor', '^': 'xor',
    'implies': 'implies', '=>': 'implies', '->': 'implies',
    'equiv': 'equiv', '<=>': 'equiv', '<->': 'equiv',
    'diff': 'diff', '-': 'diff'}
_COMMUTATIVE: _ty.Final = {'and', 'or', 'xor', 'equiv'}


class InvalidVariable(ValueError):
    """Variable index outside the declared range."""


class UnsupportedOperation(ValueError):
    """Operands belong to different managers."""


class BDD:
    """Shared reduced ordered binary decision diagram.

    The terminal nodes are 0 (FALSE) and 1 (TRUE).
    Other nodes are integers >= 2, allocated in
    increasing order. Nodes are never removed,
    so the pool grows monotonically until
    the manager is discarded.

    Attributes:
      - `var_num`: number of declared variables,
        which are `range(var_num)`
      - `max_nodes`: raise `RuntimeError` if this
        number of nodes would be exceeded.
      - `max_cache`: clear the operation table
        when it reaches this number of entries.

    Changing `var_num` is possible only by
    increasing it, with the method `declare`.
    """

    def __init__(
            self,
            var_num:
                int=0):
        # (level, low, high) -> node
        # tuple(nat, nat, nat) -> nat
        # terminals are absent
        self._pred = dict()
        # node -> (level, low, high)
        # nat -> tuple(nat, nat | None, nat | None)
        self._succ = dict()
        # memoized results of operators
        # (operator name, node, node | None) -> node
        self._op_table = dict()
        self.var_num = 0
        self.max_nodes = sys.maxsize
        self.max_cache = sys.maxsize
        self._init_terminals(self.var_num)
        self.declare(var_num)

    def __len__(self):
        return len(self._succ)

    def __contains__(self, u):
        return u in self._succ

    def __iter__(self):
        return iter(self._succ)

    def __str__(self):
        return (
            'Binary decision diagram:\n'
            '------------------------\n'
            f'\t {self.var_num} BDD variables\n'
            f'\t {len(self)} nodes\n')

    def configure(self, **kw):
        """Read and apply parameter values.

        First read parameter values (returned as `dict`),
        then apply `kw`. Available keyword arguments:

        - `'max_nodes'`: upper bound on the number of nodes
        - `'max_cache'`: upper bound on the number of
          entries of the operation table
        """
        d = dict(
            max_nodes=self.max_nodes,
            max_cache=self.max_cache)
        for k, v in kw.items():
            if k == 'max_nodes':
                if v < len(self):
                    raise ValueError(
                        f'{v = } is smaller than the '
                        f'current number of nodes ({len(self)})')
                self.max_nodes = v
            elif k == 'max_cache':
                if v < 1:
                    raise ValueError(
                        f'{v = } (expected integer >= 1)')
                self.max_cache = v
            else:
                raise ValueError(
                    f'Unknown parameter "{k}"')
        return d

    def statistics(self):
        """Return `dict` with BDD manager statistics."""
        return dict(
            n_vars=self.var_num,
            n_nodes=len(self),
            n_cached=len(self._op_table),
            max_nodes=self.max_nodes,
            max_cache=self.max_cache)

    def _init_terminals(self, level):
        """Place constant nodes `0` and `1` at `level`.

        Used for initialization and to shift the terminals
        to lower levels, as fresh variables are being added.
        """
        for u in (FALSE, TRUE):
            self._succ[u] = (level, None, None)

    def declare(
            self,
            var_num:
                int
            ) -> None:
        """Ensure that variables `range(var_num)` exist.

        New variables are added at the bottom levels,
        so existing nodes remain valid.

        Raise `ValueError` if `var_num` is smaller
        than the number of declared variables.
        """
        if var_num < self.var_num:
            raise ValueError(
                f'{var_num = } < {self.var_num = }, '
                'variables cannot be removed')
        if var_num == self.var_num:
            return
        logger.debug(
            f'declaring {var_num - self.var_num} '
            f'new variables (total {var_num})')
        self.var_num = var_num
        self._init_terminals(var_num)

    def succ(
            self,
            u:
                _Node
            ) -> _Fork:
        """Return `(level, low, high)` for node `u`."""
        self._check_node(u)
        return self._succ[u]

    def _check_node(self, u):
        """Raise `ValueError` if `u` is not a node of `self`."""
        if u in self._succ:
            return
        raise ValueError(
            f'{u} is not a reference to '
            'a BDD node in the BDD manager '
            f'`self` ({self!r})')

    def _check_var(self, var):
        """Raise `InvalidVariable` if `var` is undeclared."""
        if isinstance(var, int) and 0 <= var < self.var_num:
            return
        raise InvalidVariable(
            f'undeclared variable {var!r}, '
            'the declared variables are: '
            f'range({self.var_num})')

    def var(
            self,
            var:
                _Variable
            ) -> _Node:
        """Return node that is TRUE iff `var` is TRUE."""
        self._check_var(var)
        return self.find_or_add(var, FALSE, TRUE)

    def nvar(
            self,
            var:
                _Variable
            ) -> _Node:
        """Return node that is TRUE iff `var` is FALSE."""
        self._check_var(var)
        return self.find_or_add(var, TRUE, FALSE)

    def find_or_add(
            self,
            i:
                _Variable,
            v:
                _Node,
            w:
                _Node
            ) -> _Node:
        """Return node at level `i` with successors `v, w`.

        If such a node exists already,
        then it is quickly found in the cached table,
        and returned.

        @param i:
            level in `range(self.var_num)`
        @param v:
            low edge
        @param w:
            high edge
        """
        self._check_var(i)
        self._check_node(v)
        self._check_node(w)
        # levels must increase towards the terminals
        iv, _, _ = self._succ[v]
        iw, _, _ = self._succ[w]
        if not (i < iv and i < iw):
            raise ValueError(
                f'level {i} is not above the levels '
                f'of its successors ({iv}, {iw})')
        # eliminate
        if v == w:
            return v
        # already exists ?
        t = (i, v, w)
        u = self._pred.get(t)
        if u is not None:
            return u
        u = len(self._succ)
        if u >= self.max_nodes:
            raise RuntimeError(
                'full: reached `self.max_nodes` nodes '
                f'({self.max_nodes = }).')
        if u in self._succ:
            raise AssertionError(
                f'node index {u} is already used')
        # add node
        self._pred[t] = u
        self._succ[u] = t
        return u

    def apply(
            self,
            op:
                qdd._abc.OperatorSymbol,
            u:
                _Node,
            v:
                _Node |
                None=None
            ) -> _Node:
        """Return the result of applying `op` to `u`, `v`.

        The operator `'not'` is unary,
        all other operators are binary.
        """
        name = _OPERATORS.get(op)
        if name is None:
            raise ValueError(
                f'unknown operator "{op}"')
        self._check_node(u)
        if name == 'not':
            if v is not None:
                raise ValueError(v)
        else:
            if v is None:
                raise ValueError(v)
            self._check_node(v)
        return self._apply(name, u, v)

    def _apply(self, op, u, v):
        """Recurse to compute `u op v`."""
        r = _terminal_case(op, u, v)
        if r is not None:
            return r
        if op in _COMMUTATIVE and v < u:
            u, v = v, u
        # already computed ?
        t = (op, u, v)
        r = self._op_table.get(t)
        if r is not None:
            return r
        z, _, _ = self._succ[u]
        if v is not None:
            z = min(z, self._succ[v][0])
        u0, u1 = self._top_cofactor(u, z)
        if v is None:
            p = self._apply(op, u0, None)
            q = self._apply(op, u1, None)
        else:
            v0, v1 = self._top_cofactor(v, z)
            p = self._apply(op, u0, v0)
            q = self._apply(op, u1, v1)
        r = self.find_or_add(z, p, q)
        self._memoize(t, r)
        return r

    def _memoize(self, t, r):
        """Store `r` as the result of operation `t`."""
        if len(self._op_table) >= self.max_cache:
            logger.debug(
                'clearing the operation table '
                f'({len(self._op_table)} entries)')
            self._op_table = dict()
        self._op_table[t] = r

    def _top_cofactor(self, u, i):
        """Return restriction for assignment to single variable.

        @param u:
            node
        @param i:
            variable level
        """
        iu, v, w = self._succ[u]
        # u independent of var ?
        if i < iu:
            return (u, u)
        if iu != i:
            raise AssertionError(
                'for i > iu, call cofactor instead '
                f'({i = }, {iu = })')
        return (v, w)

    def restrict(
            self,
            u:
                _Node,
            var:
                _Variable,
            value:
                bool
            ) -> _Node:
        """Return `u` with `value` substituted for `var`."""
        return self.cofactor(u, {var: value})

    def cofactor(
            self,
            u:
                _Node,
            values:
                _Assignment
            ) -> _Node:
        """Substitute Boolean `values` for variables in `u`.

        @param u:
            node
        @param values:
            `dict` that maps variables to `bool`
        """
        self._check_node(u)
        for var in values:
            self._check_var(var)
        cache = dict()
        ordvar = sorted(values)
        j = 0
        return self._cofactor(u, j, ordvar, values, cache)

    def _cofactor(self, u, j, ordvar, values, cache):
        """Recurse to compute cofactor."""
        # terminal ?
        if u in (FALSE, TRUE):
            return u
        # memoized ?
        if u in cache:
            return cache[u]
        i, v, w = self._succ[u]
        n = len(ordvar)
        # skip nonessential variables
        while j < n:
            if ordvar[j] < i:
                j += 1
            else:
                break
        if j == n:
            # exhausted valuation
            return u
        # recurse
        if i in values:
            if values[i]:
                v = w
            r = self._cofactor(v, j, ordvar, values, cache)
        else:
            p = self._cofactor(v, j, ordvar, values, cache)
            q = self._cofactor(w, j, ordvar, values, cache)
            r = self.find_or_add(i, p, q)
        cache[u] = r
        return r

    def is_false(
            self,
            u:
                _Node
            ) -> bool:
        """Return `True` if `u` is the terminal FALSE."""
        self._check_node(u)
        return u == FALSE

    def is_true(
            self,
            u:
                _Node
            ) -> bool:
        """Return `True` if `u` is the terminal TRUE."""
        self._check_node(u)
        return u == TRUE

    def descendants(self, roots):
        """Return nodes reachable from `roots`.

        Nodes in `roots` are included.
        """
        roots = set(roots)
        visited = set()
        for u in roots:
            self._check_node(u)
            self._descendants(u, visited)
        if not roots.issubset(visited):
            raise AssertionError((roots, visited))
        return visited

    def _descendants(self, u, visited):
        if u in visited:
            return
        visited.add(u)
        # terminal ?
        if u in (FALSE, TRUE):
            return
        _, v, w = self._succ[u]
        self._descendants(v, visited)
        self._descendants(w, visited)

    def support(
            self,
            u:
                _Node
            ) -> set[_Variable]:
        """Return variables that node `u` depends on."""
        self._check_node(u)
        levels = set()
        nodes = set()
        self._support(u, levels, nodes)
        return levels

    def _support(self, u, levels, nodes):
        """Recurse to collect variables in support."""
        # exhausted all vars ?
        if len(levels) == self.var_num:
            return
        # visited ?
        if u in nodes:
            return
        nodes.add(u)
        # terminal ?
        if u in (FALSE, TRUE):
            return
        # add var
        i, v, w = self._succ[u]
        levels.add(i)
        # recurse
        self._support(v, levels, nodes)
        self._support(w, levels, nodes)

    def count(
            self,
            u:
                _Node,
            nvars:
                int |
                None=None
            ) -> int:
        """Return number of models of node `u`.

        @param nvars:
            number of variables to count over.
            If `None`, then count over the support of `u`.
            Else `nvars` must be at least the number of
            variables in the support of `u`, and the
            remaining variables are counted as
            unconstrained.
        """
        n = nvars
        levels = self.support(u)
        k = len(levels)
        if n is None:
            n = k
        slack = n - k
        if slack < 0:
            raise ValueError(
                f'{nvars = } is smaller than the '
                f'number of variables in the support ({k})')
        # index those levels in support separately
        map_level = dict()
        for new, old in enumerate(sorted(levels)):
            map_level[old] = new + slack
        map_level[self.var_num] = n
        r = self._sat_len(u, map_level, d=dict())
        i, _, _ = self._succ[u]
        i = map_level[i]
        return r * 2**i

    def _sat_len(self, u, map_level, d):
        """Recurse to compute the number of models."""
        # terminal ?
        if u == TRUE:
            return 1
        if u == FALSE:
            return 0
        # memoized ?
        if u in d:
            return d[u]
        i, v, w = self._succ[u]
        i = map_level[i]
        # non-terminal
        nv = self._sat_len(v, map_level, d)
        nw = self._sat_len(w, map_level, d)
        iv, _, _ = self._succ[v]
        iw, _, _ = self._succ[w]
        iv = map_level[iv]
        iw = map_level[iw]
        # sum
        n = (nv * 2**(iv - i - 1) +
             nw * 2**(iw - i - 1))
        d[u] = n
        return n

    def pick(
            self,
            u:
                _Node,
            care_vars:
                set[_Variable] |
                None=None
            ) -> _Assignment | None:
        """Return a satisfying assignment, or `None`."""
        return next(self.pick_iter(u, care_vars), None)

    def pick_iter(
            self,
            u:
                _Node,
            care_vars:
                set[_Variable] |
                None=None
            ) -> _abc.Iterable[_Assignment]:
        """Return generator of satisfying assignments.

        Each assignment maps to `bool` every variable
        in `care_vars`, and every variable in the
        support of `u`.

        @param care_vars:
            if `None`, then the support of `u`
        """
        self._check_node(u)
        support = self.support(u)
        if care_vars is None:
            care_vars = support
        missing = {v for v in support if v not in care_vars}
        if missing:
            logger.warning(
                'Missing bits:  '
                f'support - care_vars = {missing}')
        cube = dict()
        for cube in self._sat_iter(u, cube):
            for m in _enumerate_minterms(cube, care_vars):
                yield m

    def _sat_iter(self, u, cube):
        """Recurse to enumerate models."""
        # terminal ?
        if u == TRUE:
            yield cube
            return
        if u == FALSE:
            return
        # non-terminal
        i, v, w = self._succ[u]
        d0 = dict(cube)
        d0[i] = False
        d1 = dict(cube)
        d1[i] = True
        yield from self._sat_iter(v, d0)
        yield from self._sat_iter(w, d1)

    def to_expr(
            self,
            u:
                _Node
            ) -> str:
        """Return a Boolean expression of node `u`.

        Variable `i` is written as `x{i}`.
        """
        self._check_node(u)
        return self._to_expr(u, cache=dict())

    def _to_expr(self, u, cache):
        if u == TRUE:
            return 'TRUE'
        if u == FALSE:
            return 'FALSE'
        if u in cache:
            return cache[u]
        i, v, w = self._succ[u]
        var = _var_str(i)
        p = self._to_expr(v, cache)
        q = self._to_expr(w, cache)
        # pure var ?
        if p == 'FALSE' and q == 'TRUE':
            s = var
        elif p == 'TRUE' and q == 'FALSE':
            s = f'(~ {var})'
        else:
            s = f'ite({var}, {q}, {p})'
        cache[u] = s
        return s

    def assert_consistent(self):
        """Raise `AssertionError` if not a valid BDD."""
        for u in (FALSE, TRUE):
            if self._succ.get(u) != (self.var_num, None, None):
                raise AssertionError(
                    f'terminal {u} misplaced: '
                    f'{self._succ.get(u)}')
        # inverses
        nonterminals = set(self._succ).difference({FALSE, TRUE})
        pred_values = set(self._pred.values())
        if nonterminals != pred_values:
            raise AssertionError(
                nonterminals.symmetric_difference(pred_values))
        # uniqueness
        if len(self._pred) != len(nonterminals):
            raise AssertionError(
                (len(self._pred), len(nonterminals)))
        for u in nonterminals:
            i, v, w = self._succ[u]
            if not isinstance(i, int):
                raise TypeError(i)
            if not (0 <= i < self.var_num):
                raise AssertionError((u, i))
            if v not in self._succ:
                raise AssertionError(v)
            if w not in self._succ:
                raise AssertionError(w)
            # reduced ?
            if v == w:
                raise AssertionError((u, v, w))
            # var order should increase
            for x in (v, w):
                ix, _, _ = self._succ[x]
                if not (i < ix):
                    raise AssertionError((u, i))
            # `_pred` contains inverse of `_succ`
            if self._pred.get((i, v, w)) != u:
                raise AssertionError(u)
        return True

    def dump(
            self,
            filename:
                str,
            roots=None,
            filetype:
                str |
                None=None,
            **kw
            ) -> None:
        """Write BDDs to `filename` as figure.

        Requires the package `pydot`.

        @param filetype:
            `'pdf'`, `'png'`, `'svg'`, or `'dot'`.
            If `None`, then inferred from the
            extension of `filename`.
        """
        if filetype is None:
            name = filename.lower()
            if name.endswith('.pdf'):
                filetype = 'pdf'
            elif name.endswith('.png'):
                filetype = 'png'
            elif name.endswith('.svg'):
                filetype = 'svg'
            elif name.endswith('.dot'):
                filetype = 'dot'
            else:
                raise ValueError(
                    'cannot infer file type '
                    'from extension of file '
                    f'name "{filename}"')
        g = to_pydot(roots, self)
        if filetype == 'pdf':
            g.write_pdf(filename, **kw)
        elif filetype == 'png':
            g.write_png(filename, **kw)
        elif filetype == 'svg':
            g.write_svg(filename, **kw)
        elif filetype == 'dot':
            g.write(filename, format='raw', **kw)
        else:
            raise ValueError(
                f'unknown file type "{filetype}"')

    @property
    def false(self):
        return FALSE

    @property
    def true(self):
        return TRUE


def _terminal_case(op, u, v):
    """Return result of `u op v` if it needs no recursion.

    Return `None` otherwise.
    """
    if op == 'not':
        if u == TRUE:
            return FALSE
        if u == FALSE:
            return TRUE
    elif op == 'and':
        if u == FALSE or v == FALSE:
            return FALSE
        if u == TRUE:
            return v
        if v == TRUE or u == v:
            return u
    elif op == 'or':
        if u == TRUE or v == TRUE:
            return TRUE
        if u == FALSE:
            return v
        if v == FALSE or u == v:
            return u
    elif op == 'xor':
        if u == v:
            return FALSE
        if u == FALSE:
            return v
        if v == FALSE:
            return u
    elif op == 'implies':
        if u == FALSE or v == TRUE or u == v:
            return TRUE
        if u == TRUE:
            return v
    elif op == 'equiv':
        if u == v:
            return TRUE
        if u == TRUE:
            return v
        if v == TRUE:
            return u
    elif op == 'diff':
        if u == FALSE or v == TRUE or u == v:
            return FALSE
        if v == FALSE:
            return u
    else:
        raise ValueError(
            f'unknown operator "{op}"')
    return None


def _enumerate_minterms(cube, bits):
    """Generator of complete assignments in `cube`.

    @type cube:
        `dict`
    @param bits:
        enumerate over those absent from `cube`
    @type bits:
        `set`
    @rtype:
        generator of `dict(int: bool)`
    """
    if cube is None:
        raise ValueError(cube)
    if bits is None:
        raise ValueError(bits)
    bits = set(bits).difference(cube)
    # fix order
    bits = sorted(bits)
    n = len(bits)
    for i in range(2**n):
        values = bin(i).lstrip('-0b').zfill(n)
        model = {k: bool(int(v)) for k, v in zip(bits, values)}
        model.update(cube)
        if len(model) < len(bits):
            raise AssertionError((model, bits))
        if len(model) < len(cube):
            raise AssertionError((model, cube))
        yield model


def _var_str(i):
    """Return name of variable `i` in expressions."""
    return f'x{i}'


def to_nx(bdd, roots):
    """Convert node references in `roots` to `networkx.MultiDiGraph`.

    The resulting graph has:

      - nodes labeled with:
        - `level`: `int` from 0 to `bdd.var_num`
      - edges labeled with:
        - `value`: `False` for low/"else", `True` for high/"then"

    @type bdd:
        `BDD`
    @type roots:
        iterable of nodes
    @rtype:
        `networkx.MultiDiGraph`
    """
    import networkx as nx
    g = nx.MultiDiGraph()
    for root in roots:
        if root not in bdd:
            raise ValueError(root)
        Q = {root}
        while Q:
            u = Q.pop()
            i, v, w = bdd._succ[u]
            g.add_node(u, level=i)
            # terminal ?
            if v is None or w is None:
                if v is not None:
                    raise AssertionError(v)
                if w is not None:
                    raise AssertionError(w)
                continue
            # non-terminal
            if v not in g:
                Q.add(v)
            if w not in g:
                Q.add(w)
            g.add_edge(u, v, value=False)
            g.add_edge(u, w, value=True)
    return g


def to_pydot(roots, bdd):
    """Convert `BDD` to pydot graph.

    Nodes are ordered by variable levels in support.
    Edges to low successors are dashed.

    Nodes not reachable from `roots`
    are ignored, unless `roots is None`.

    The roots are plotted as external references.

    @type roots:
        container of BDD nodes
    @type bdd:
        `BDD`
    """
    import pydot
    # all nodes ?
    if roots is None:
        nodes = set(bdd._succ)
        roots = list()
    else:
        nodes = bdd.descendants(roots)
    # show only levels in aggregate support
    levels = {bdd._succ[u][0] for u in nodes}
    g = pydot.Dot('bdd', graph_type='digraph')
    skeleton = list()
    subgraphs = dict()
    # layer for external BDD references
    layers = [-1] + sorted(levels)
    # add nodes for BDD levels
    for i in layers:
        h = pydot.Subgraph('', rank='same')
        g.add_subgraph(h)
        subgraphs[i] = h
        # add phantom node
        u = f'L{i}'
        skeleton.append(u)
        if i == -1:
            # layer for external BDD references
            label = 'ref'
        else:
            # BDD level
            label = str(i)
        nd = pydot.Node(name=u, label=label, shape='none')
        h.add_node(nd)
    # auxiliary edges for ranking
    for i, u in enumerate(skeleton[:-1]):
        v = skeleton[i + 1]
        e = pydot.Edge(str(u), str(v), style='invis')
        g.add_edge(e)
    # BDD nodes
    for u in nodes:
        i, v, w = bdd._succ[u]
        # terminal ?
        if v is None:
            label = 'TRUE' if u == TRUE else 'FALSE'
            nd = pydot.Node(name=str(u), label=label, shape='box')
        else:
            label = f'{_var_str(i)}-{u}'
            nd = pydot.Node(name=str(u), label=label)
        # add node to subgraph for level i
        h = subgraphs[i]
        h.add_node(nd)
        # add edges
        if v is None:
            continue
        e = pydot.Edge(str(u), str(v), style='dashed')
        g.add_edge(e)
        e = pydot.Edge(str(u), str(w), style='solid')
        g.add_edge(e)
    # external references to BDD nodes
    for u in roots:
        su = f'ref{u}'
        label = f'@{u}'
        nd = pydot.Node(name=su, label=label)
        # add node to subgraph for level -1
        h = subgraphs[-1]
        h.add_node(nd)
        # add edge from external reference to BDD node
        e = pydot.Edge(su, str(u), style='dashed')
        g.add_edge(e)
    return g
