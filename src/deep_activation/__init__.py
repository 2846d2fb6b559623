from deep_activation.utils.activation_functions import Differentiable, Sigmoid, Tanh, ReLU, Linear, logistic
from deep_activation.utils.constants import Mode, ActivationType
from deep_activation.activation import output_activation, get_activation
