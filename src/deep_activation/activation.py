from deep_activation.utils.constants import *
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def output_activation(mode):
    """
    Returns the ActivationType the output layer should use for a training mode.

    Defined for every integer: Mode.DEFAULT and values outside the Mode enum
    resolve to ActivationType.NONE instead of raising.
    """
    activation_type = OUTPUT_ACTIVATION_MAP.get(mode)
    if activation_type is None:
        logger.debug(f"No output activation for mode {mode!r}, using {DEFAULT_OUTPUT_ACTIVATION.name}")
        return DEFAULT_OUTPUT_ACTIVATION
    logger.debug(f"Mode {mode!r} uses {activation_type.name} output activation")
    return activation_type


def get_activation(activation_type):
    """
    Returns the Differentiable implementing an ActivationType.

    Softmax, ActivationType.NONE and unknown values all get Linear.
    """
    activation_cls = ACTIVATION_FUNCTION_MAP.get(activation_type)
    if activation_cls is None:
        logger.debug(f"No activation function for {activation_type!r}, using {DEFAULT_ACTIVATION_FUNCTION.__name__}")
        activation_cls = DEFAULT_ACTIVATION_FUNCTION
    return activation_cls()
