"""Tests of the module `qdd.autoref`."""
import pytest

from qdd import autoref as _bdd
import qdd.bdd


def test_str():
    bdd = _bdd.BDD(2)
    s = str(bdd)
    assert '2 BDD variables' in s, s


def test_true_false():
    bdd = _bdd.BDD()
    true = bdd.true
    false = bdd.false
    assert false.low is None
    assert false.high is None
    assert false.var is None
    assert false != true
    assert false == ~ true
    assert false == false & true
    assert true == true | false
    assert false.is_false
    assert true.is_true
    assert not true.is_false


def test_richcmp():
    bdd = _bdd.BDD()
    assert bdd == bdd
    other = _bdd.BDD()
    assert bdd != other
    assert bdd.true != None


def test_len():
    bdd = _bdd.BDD()
    assert len(bdd) == 2, len(bdd)
    bdd.declare(2)
    u = bdd.var(0) & bdd.var(1)
    assert len(bdd) == 5, len(bdd)
    assert len(u) == 4, len(u)
    assert u.dag_size == 4, u.dag_size


def test_contains():
    bdd = _bdd.BDD(1)
    x = bdd.var(0)
    assert x in bdd
    assert bdd.true in bdd
    other = _bdd.BDD(1)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        other.var(0) in bdd


def test_succ():
    bdd = _bdd.BDD(1)
    x = bdd.var(0)
    level, low, high = bdd.succ(x)
    assert level == 0, level
    assert low == bdd.false, low
    assert high == bdd.true, high
    level, low, high = bdd.succ(bdd.true)
    assert level == 1, level
    assert low is None, low
    assert high is None, high


def test_function_attributes():
    bdd = _bdd.BDD(2)
    x = bdd.var(0)
    assert x.level == 0, x.level
    assert x.var == 0, x.var
    assert x.low == bdd.false, x.low
    assert x.high == bdd.true, x.high
    assert x.support == {0}, x.support
    not_y = bdd.nvar(1)
    assert not_y.var == 1, not_y.var
    assert not_y.low == bdd.true, not_y.low
    assert not_y.high == bdd.false, not_y.high
    assert int(x) == x.node, int(x)
    assert hash(x) == x.node, hash(x)
    assert repr(x) == f'Function({x.node})', repr(x)
    assert x.to_expr() == 'x0', x.to_expr()


def test_operators():
    bdd = _bdd.BDD(2)
    x = bdd.var(0)
    y = bdd.var(1)
    u = x & y
    assert u.count() == 1, u.count()
    u = x | y
    assert u.count() == 3, u.count()
    u = x.implies(y)
    assert u == ~ x | y, u
    u = x.equiv(y)
    assert u == ~ (x ^ y), u
    assert ~ x == bdd.nvar(0)
    assert bdd.apply('and', x, y) == x & y
    assert bdd.apply('not', x) == ~ x
    with pytest.raises(TypeError):
        x & 1


def test_restrict():
    bdd = _bdd.BDD(2)
    x = bdd.var(0)
    y = bdd.var(1)
    u = x & y
    assert u.restrict(0, True) == y
    assert u.restrict(0, False).is_false
    assert bdd.restrict(u, 1, True) == x
    assert bdd.cofactor(u, {0: True, 1: True}) == bdd.true
    with pytest.raises(qdd.bdd.InvalidVariable):
        u.restrict(2, True)


def test_count():
    bdd = _bdd.BDD(3)
    x = bdd.var(0)
    y = bdd.var(1)
    u = x | y
    assert bdd.count(u) == 3, bdd.count(u)
    assert bdd.count(u, 3) == 6, bdd.count(u, 3)
    assert u.count(3) == 6, u.count(3)
    assert bdd.support(u) == {0, 1}, bdd.support(u)


def test_find_or_add():
    bdd = _bdd.BDD(2)
    n = len(bdd)
    u = bdd.find_or_add(0, bdd.false, bdd.true)
    m = len(bdd)
    assert n < m, (n, m)
    assert u == bdd.var(0), u
    u_ = bdd.find_or_add(0, bdd.false, bdd.true)
    assert u == u_, (u, u_)
    assert len(bdd) == m, len(bdd)
    y = bdd.var(1)
    u = bdd.find_or_add(0, y, bdd.true)
    assert u == bdd.var(0) | y, u


def test_pick():
    bdd = _bdd.BDD(2)
    u = bdd.var(0) & bdd.nvar(1)
    assert bdd.pick(u) == {0: True, 1: False}, bdd.pick(u)
    models = list(bdd.pick_iter(bdd.var(0), care_vars={0, 1}))
    assert len(models) == 2, models
    assert bdd.pick(bdd.false) is None


def test_mixing_managers():
    a = _bdd.BDD(4)
    b = _bdd.BDD(9)
    x = a.var(0)
    y = b.var(0)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        x & y
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        x | y
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        x.implies(y)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        x == y
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        a.restrict(y, 0, True)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        a.count(y)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        a.apply('and', x, y)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        a.dump('bdd.pdf', roots=[y])
    # same size, different managers
    c = _bdd.BDD(4)
    with pytest.raises(qdd.bdd.UnsupportedOperation):
        x & c.var(0)


def test_configure():
    bdd = _bdd.BDD(2)
    d = bdd.configure(max_nodes=3)
    assert 'max_nodes' in d, d
    bdd.var(0)
    with pytest.raises(RuntimeError):
        bdd.var(1)
    d = bdd.statistics()
    assert d['n_nodes'] == 3, d
    bdd.assert_consistent()
