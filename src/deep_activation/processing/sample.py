import numpy as np
import pandas as pd
from deep_activation.activation import get_activation
from deep_activation.utils.constants import DEFAULT_NUM_POINTS
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def sample_activation(activation_type, start, stop, num_points=DEFAULT_NUM_POINTS):
    '''
    Evaluate an activation at num_points evenly spaced inputs in [start, stop].
    The derivative is taken on the forward output, the same value a layer
    caches during the forward pass and hands to Df during backprop.
    Returns a DataFrame with columns x, y, dy
    '''
    if num_points <= 0:
        raise ValueError("num_points must be a positive integer")

    activation = get_activation(activation_type)
    logger.debug(f"Sampling {activation!r} at {num_points} points in [{start}, {stop}]")

    xs = np.linspace(start, stop, num_points)
    # one scalar call per point, F and Df are not vectorised over layers
    ys = [float(activation.F(x)) for x in xs]
    dys = [float(activation.Df(y)) for y in ys]

    samples = pd.DataFrame({"x": xs, "y": ys, "dy": dys})
    samples.attrs["activation"] = activation.name
    return samples
