import sys
from deep_activation.processing.sample import sample_activation
from deep_activation.log.log import log_activation_samples
from deep_activation.utils.constants import ACTIVATION_NAME_MAP
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

USAGE = "Usage: deep-activation <activation> <start> <stop> <num_points> <debug (y/n)> [logfile]"

# Validation functions for user inputs
def validateActivationFunction(value):
    valid_functions = list(ACTIVATION_NAME_MAP)
    if value not in valid_functions:
        raise ValueError(f"Activation function must be one of {valid_functions}")
    return value

def validateFloat(value):
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Value must be a number, got {value!r}")

def validatePositiveInteger(value):
    int_value = int(value)
    if int_value <= 0:
        raise ValueError("Value must be a positive integer")
    return int_value

def validateYesNoInput(value):
    if value not in ['y', 'n']:
        raise ValueError("Input must be 'y' or 'n'")
    return value == 'y'


def main(argv=None):
    # get user input for the following attributes:
    # activation function, input range start and stop, number of points, debug, optional CSV log file
    args = sys.argv[1:] if argv is None else argv
    if len(args) not in (5, 6):
        print(USAGE)
        return 1

    try:
        activation = validateActivationFunction(args[0].lower())
        start = validateFloat(args[1])
        stop = validateFloat(args[2])
        num_points = validatePositiveInteger(args[3])
        debug_mode = validateYesNoInput(args[4].lower())
        if debug_mode:
            logger.setLevel(logging.DEBUG)
            logging.getLogger("deep_activation").setLevel(logging.DEBUG)
    except ValueError as e:
        logger.error(f"Input error: {e}")
        return 1
    logfile = args[5] if len(args) == 6 else None

    # Print out user inputs back
    logger.info("User inputs:")
    logger.info(f"Activation: {activation}")
    logger.info(f"Range: [{start}, {stop}]")
    logger.info(f"Points: {num_points}")

    samples = sample_activation(ACTIVATION_NAME_MAP[activation], start, stop, num_points)
    logger.info(f"Samples for {activation}:\n{samples.to_string(index=False)}")

    if logfile:
        log_activation_samples(activation, samples, logfile=logfile)
        logger.info(f"Appended {len(samples)} samples to {logfile}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
