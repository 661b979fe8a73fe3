import pytest

from Activations import Linear, ReLU, Sigmoid, Tanh, get_activation
from NeuralNet import ConfigurationError


@pytest.mark.parametrize("x", [-1e6, -3.5, 0.0, 2.25, 1e6])
def test_linear_is_identity(x):
    act = Linear()
    assert act.activate(x) == x
    assert act.derivative(x) == 1.0


def test_sigmoid_values():
    act = Sigmoid()
    assert act.activate(0) == 0.5
    for x in [-30.0, -2.0, -0.1, 0.1, 2.0, 30.0]:
        assert 0.0 < act.activate(x) < 1.0
    assert act.activate(2.0) == pytest.approx(1 - act.activate(-2.0))


@pytest.mark.parametrize("y", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_sigmoid_derivative_uses_output(y):
    assert Sigmoid().derivative(y) == pytest.approx(y * (1 - y))


def test_tanh_and_relu():
    assert Tanh().activate(0.0) == 0.0
    assert Tanh().derivative(0.5) == pytest.approx(0.75)
    assert ReLU().activate(-2.0) == 0.0
    assert ReLU().activate(3.0) == 3.0
    assert ReLU().derivative(0.0) == 0.0
    assert ReLU().derivative(3.0) == 1.0


def test_get_activation():
    assert isinstance(get_activation("Sigmoid"), Sigmoid)
    assert isinstance(get_activation("linear"), Linear)
    with pytest.raises(ConfigurationError):
        get_activation("softmax")
