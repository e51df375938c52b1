"""
Forward values, node wiring and error cases of the operators.
"""

import math

import numpy as np
import pytest

from aad_backprop.aad import Value, OpKind, differentiate, topological_sort
from aad_backprop.aad import ops


def test_leaf_construction():
    a = Value(2, label="a")
    assert isinstance(a.data, np.float64)
    assert a.data == 2.0
    assert a.grad == 0.0
    assert a.label == "a"
    assert a.op is None
    assert a.parents == []
    assert a.is_leaf


def test_leaf_rejects_non_numbers():
    with pytest.raises(TypeError):
        Value("2.0")
    with pytest.raises(TypeError):
        Value(True)
    with pytest.raises(TypeError):
        Value([1.0, 2.0])


def test_value_from_value_is_alias():
    a = Value(1.0, label="a")
    b = Value(a)
    assert b.node is a.node


def test_data_and_grad_read_only():
    a = Value(1.0)
    with pytest.raises(AttributeError):
        a.data = 2.0
    with pytest.raises(AttributeError):
        a.grad = 2.0


def test_relabel_visible_through_aliases():
    a = Value(1.0, label="a")
    b = a.clone()
    b.relabel("renamed")
    assert a.label == "renamed"
    a.label = "again"
    assert b.label == "again"


def test_binary_ops_record_parents_in_order():
    a = Value(2.0, label="a")
    b = Value(5.0, label="b")
    for out, kind in ((a + b, OpKind.ADD), (a * b, OpKind.MUL)):
        assert out.op is kind
        assert out.node.parents == (a.node, b.node)
        assert out.label == kind.value


def test_unary_ops_record_parent():
    a = Value(0.5, label="a")
    for out, kind in ((a.tanh(), OpKind.TANH), (a.exp(), OpKind.EXP), (a ** 3, OpKind.POW)):
        assert out.op is kind
        assert out.node.parents == (a.node,)
    assert (a ** 3).node.exponent == 3.0
    assert a.tanh().node.exponent is None


def test_forward_values():
    a = Value(2.0)
    b = Value(-4.0)
    assert (a + b).data == -2.0
    assert (a * b).data == -8.0
    assert (a - b).data == 6.0
    assert (b / a).data == -2.0
    assert (a ** 3).data == 8.0
    assert (-a).data == -2.0
    assert a.exp().data == pytest.approx(math.exp(2.0))
    assert b.tanh().data == pytest.approx(math.tanh(-4.0))


def test_plain_numbers_on_either_side():
    a = Value(4.0, label="a")
    assert (a + 1).data == 5.0
    assert (1 + a).data == 5.0
    assert (a * 2).data == 8.0
    assert (2 * a).data == 8.0
    assert (a - 1.5).data == 2.5
    assert (10 - a).data == 6.0
    assert (a / 2).data == 2.0
    assert (2 / a).data == 0.5


def test_sub_desugars_to_add_and_mul():
    a = Value(2.0, label="a")
    b = Value(3.0, label="b")
    c = a - b
    assert c.op is OpKind.ADD
    assert c.node.parents[0] is a.node
    neg_b = c.node.parents[1]
    assert neg_b.op is OpKind.MUL
    assert neg_b.parents[0] is b.node
    assert neg_b.parents[1].data == -1.0

    differentiate(c)
    assert c.data == -1.0
    assert a.grad == 1.0
    assert b.grad == -1.0


def test_div_desugars_to_mul_and_pow():
    a = Value(2.0, label="a")
    b = Value(3.0, label="b")
    c = b / a
    assert c.op is OpKind.MUL
    assert c.node.parents[0] is b.node
    inv_a = c.node.parents[1]
    assert inv_a.op is OpKind.POW
    assert inv_a.exponent == -1.0

    differentiate(c)
    assert c.data == 1.5
    assert b.grad == pytest.approx(0.5)
    assert a.grad == pytest.approx(-0.75)


def test_only_primitive_kinds_in_graph():
    a = Value(1.5)
    b = Value(-0.5)
    out = ((a - b) / (a * b) + (-a) ** 2).tanh().exp()
    kinds = {node.op for node in topological_sort(out) if node.op is not None}
    assert kinds <= set(OpKind)


def test_neg_gradient():
    a = Value(3.0)
    c = -a
    differentiate(c)
    assert a.grad == -1.0


def test_exp_gradient():
    a = Value(1.0)
    c = a.exp()
    differentiate(c)
    assert c.data == pytest.approx(math.e)
    assert a.grad == pytest.approx(math.e)


def test_fractional_power_gradient():
    a = Value(4.0)
    c = a ** 0.5
    differentiate(c)
    assert c.data == 2.0
    assert a.grad == pytest.approx(0.25)


def test_divide_by_zero_value_aborts():
    a = Value(1.0, label="a")
    zero = Value(0.0, label="zero")
    with pytest.raises(ZeroDivisionError):
        a / zero
    # nothing was attached to the divisor
    assert topological_sort(zero) == [zero.node]
    assert zero.grad == 0.0


def test_divide_by_zero_number_aborts():
    a = Value(1.0)
    with pytest.raises(ZeroDivisionError):
        a / 0
    with pytest.raises(ZeroDivisionError):
        1.0 / Value(0.0)


def test_pow_rejects_value_exponent():
    a = Value(2.0)
    with pytest.raises(TypeError):
        a ** Value(2.0)
    with pytest.raises(TypeError):
        2.0 ** a


def test_module_level_functions():
    a = Value(2.0)
    b = Value(3.0)
    assert ops.add(a, b).data == 5.0
    assert ops.sub(a, b).data == -1.0
    assert ops.mul(a, b).data == 6.0
    assert ops.div(b, a).data == 1.5
    assert ops.neg(a).data == -2.0
    assert ops.pow(a, 3).data == 8.0
    assert ops.tanh(0.0).data == 0.0
    assert ops.exp(0.0).data == 1.0


def test_set_data_leaf_only():
    a = Value(1.0)
    a.set_data(2.5)
    assert a.data == 2.5
    c = a * 2.0
    with pytest.raises(ValueError):
        c.set_data(0.0)
    with pytest.raises(TypeError):
        a.set_data("x")


def test_repr():
    a = Value(2.0, label="a")
    assert repr(a) == "Value(data=2.000000, grad=0.000000, label='a', op=None)"
    assert "op='tanh'" in repr(a.tanh())


def test_result_nodes_labelled_with_operator():
    a = Value(2.0, label="a")
    assert (a + 1.0).label == "+"
    assert (a * a).label == "*"
    assert (a ** 2).label == "pow"
    assert a.tanh().label == "tanh"
    assert a.exp().label == "exp"
    # composed ops carry the label of their last primitive
    assert (a - 1.0).label == "+"
    assert (a / 2.0).label == "*"


def test_value_from_value_applies_label():
    a = Value(1.0, label="a")
    b = Value(a, label="renamed")
    assert b.node is a.node
    assert a.label == "renamed"
    Value(a)
    assert a.label == "renamed"
