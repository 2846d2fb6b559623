from enum import IntEnum
from deep_activation.utils.activation_functions import *


class Mode(IntEnum):
    DEFAULT = 0       # use default output layer activations
    MULTI_CLASS = 1   # softmax output layer for multiclass classification
    REGRESSION = 2    # linear output layer
    BINARY = 3        # sigmoid output layer for binary classification
    MULTI_LABEL = 4   # sigmoid output layer with multiclass CE (no softmax)


class ActivationType(IntEnum):
    NONE = 0
    SIGMOID = 1
    TANH = 2
    RELU = 3
    LINEAR = 4
    SOFTMAX = 5


# Output layer activation for each training mode.
# Anything not listed resolves to ActivationType.NONE
OUTPUT_ACTIVATION_MAP = {
    Mode.MULTI_CLASS: ActivationType.SOFTMAX,
    Mode.REGRESSION: ActivationType.LINEAR,
    Mode.BINARY: ActivationType.SIGMOID,
    Mode.MULTI_LABEL: ActivationType.SIGMOID,
}

# Softmax has no per-element derivative here, its gradient is folded into
# the cross entropy loss by the caller. Anything not listed resolves to Linear
ACTIVATION_FUNCTION_MAP = {
    ActivationType.SIGMOID: Sigmoid,
    ActivationType.TANH: Tanh,
    ActivationType.RELU: ReLU,
    ActivationType.LINEAR: Linear,
    ActivationType.SOFTMAX: Linear,
}

DEFAULT_OUTPUT_ACTIVATION = ActivationType.NONE
DEFAULT_ACTIVATION_FUNCTION = Linear

# names accepted on the command line
ACTIVATION_NAME_MAP = {
    "none": ActivationType.NONE,
    "sigmoid": ActivationType.SIGMOID,
    "tanh": ActivationType.TANH,
    "relu": ActivationType.RELU,
    "linear": ActivationType.LINEAR,
    "softmax": ActivationType.SOFTMAX,
}

DEFAULT_NUM_POINTS = 11
DEFAULT_SAMPLE_LOGFILE = "../logs/activation_samples.csv"
