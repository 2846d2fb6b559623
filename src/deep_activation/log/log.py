import os
from deep_activation.utils.constants import DEFAULT_SAMPLE_LOGFILE

def log_activation_samples(activation, samples, logfile=DEFAULT_SAMPLE_LOGFILE):
    """
    Appends one line per sampled point (activation, x, y, dy) to a CSV file.
    The header is written only when the file is created.
    """
    logdir = os.path.dirname(logfile)
    if logdir:
        os.makedirs(logdir, exist_ok=True)

    # earlier runs of the same log keep their rows
    is_new_log = not os.path.exists(logfile)

    with open(logfile, "a") as f:
        if is_new_log:
            f.write("activation,x,y,dy\n")
        for row in samples.itertuples(index=False):
            f.write(f"{activation},{row.x:.6f},{row.y:.6f},{row.dy:.6f}\n")
