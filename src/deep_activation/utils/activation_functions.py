import numpy as np
from scipy.special import expit


def logistic(x, a):
    """Logistic curve 1 / (1 + e^(-a*x)) with steepness a."""
    return expit(a * x)


class Differentiable:
    """
    A per-neuron activation: F(x) is the forward value and Df is the local
    gradient used in backprop.

    Df takes the cached forward output y = F(x) for Sigmoid, Tanh and ReLU,
    not the raw input x. Callers must hold on to the activation value.
    Implementations carry no state, so any two instances of the same
    variant are interchangeable.
    """
    __slots__ = ()

    name = None

    def F(self, x):
        raise NotImplementedError

    def Df(self, y):
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class Sigmoid(Differentiable):
    __slots__ = ()
    name = "sigmoid"

    def F(self, x):
        return logistic(x, 1)

    def Df(self, y):
        return y * (1 - y)


class Tanh(Differentiable):
    __slots__ = ()
    name = "tanh"

    def F(self, x):
        # exponential form, not np.tanh; results can differ in the last bit
        with np.errstate(over="ignore", invalid="ignore"):
            e = np.exp(-2 * np.float64(x))
            return (1 - e) / (1 + e)

    def Df(self, y):
        return 1 - y ** 2


class ReLU(Differentiable):
    __slots__ = ()
    name = "relu"

    def F(self, x):
        return np.maximum(np.float64(x), 0.0)

    def Df(self, y):
        if y > 0:
            return 1.0
        return 0.0


class Linear(Differentiable):
    __slots__ = ()
    name = "linear"

    def F(self, x):
        return np.float64(x)

    def Df(self, x):
        return 1.0
