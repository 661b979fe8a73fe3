import numpy as np

from NeuralNet import ConfigurationError


class Activation:
    """
    Activation strategy shared by the neurons of a layer.
    derivative() takes the value returned by activate(), not the weighted sum,
    so only functions whose slope can be written in terms of f(x) fit here.
    """
    name = None

    def activate(self, x):
        raise NotImplementedError

    def derivative(self, y):
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"


class Linear(Activation):
    name = "linear"

    def activate(self, x):
        return x

    def derivative(self, y):
        return 1.0


class Sigmoid(Activation):
    name = "sigmoid"

    def activate(self, x):
        return 1.0 / (1.0 + np.exp(-x))

    def derivative(self, y):
        return y * (1 - y)


class Tanh(Activation):
    name = "tanh"

    def activate(self, x):
        return np.tanh(x)

    def derivative(self, y):
        return 1 - y**2


class ReLU(Activation):
    name = "relu"

    def activate(self, x):
        return max(0.0, x)

    def derivative(self, y):
        # 1 if output > 0 else 0
        return 1.0 if y > 0 else 0.0


ACTIVATIONS = {cls.name: cls for cls in (Linear, Sigmoid, Tanh, ReLU)}


def get_activation(name):
    """Look up an activation by name, e.g. 'sigmoid' -> Sigmoid()"""
    try:
        return ACTIVATIONS[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown activation '{name}', expected one of {sorted(ACTIVATIONS)}"
        ) from None
