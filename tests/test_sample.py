import os
import tempfile
import unittest
from deep_activation.processing.sample import sample_activation
from deep_activation.log.log import log_activation_samples
from deep_activation.utils.constants import ActivationType


class TestSampleActivation(unittest.TestCase):
    def test_relu_samples(self):
        samples = sample_activation(ActivationType.RELU, -2.0, 2.0, 5)
        self.assertEqual(list(samples.columns), ["x", "y", "dy"])
        self.assertEqual(list(samples["x"]), [-2.0, -1.0, 0.0, 1.0, 2.0])
        self.assertEqual(list(samples["y"]), [0.0, 0.0, 0.0, 1.0, 2.0])
        self.assertEqual(list(samples["dy"]), [0.0, 0.0, 0.0, 1.0, 1.0])
        self.assertEqual(samples.attrs["activation"], "relu")

    def test_sigmoid_derivative_taken_on_output(self):
        samples = sample_activation(ActivationType.SIGMOID, 0.0, 0.0, 1)
        self.assertEqual(samples["y"].iloc[0], 0.5)
        self.assertEqual(samples["dy"].iloc[0], 0.25)

    def test_unknown_type_samples_linear(self):
        samples = sample_activation(123, -1.0, 1.0, 3)
        self.assertEqual(list(samples["y"]), [-1.0, 0.0, 1.0])
        self.assertEqual(list(samples["dy"]), [1.0, 1.0, 1.0])

    def test_rejects_non_positive_points(self):
        with self.assertRaises(ValueError):
            sample_activation(ActivationType.TANH, -1.0, 1.0, 0)


class TestLogActivationSamples(unittest.TestCase):
    def test_header_written_once(self):
        samples = sample_activation(ActivationType.LINEAR, 0.0, 1.0, 2)
        with tempfile.TemporaryDirectory() as tmp:
            logfile = os.path.join(tmp, "nested", "samples.csv")
            log_activation_samples("linear", samples, logfile=logfile)
            log_activation_samples("linear", samples, logfile=logfile)
            with open(logfile) as f:
                lines = f.read().splitlines()

        self.assertEqual(lines[0], "activation,x,y,dy")
        self.assertEqual(lines.count("activation,x,y,dy"), 1)
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[1], "linear,0.000000,0.000000,1.000000")
        self.assertEqual(lines[2], "linear,1.000000,1.000000,1.000000")


if __name__ == "__main__":
    unittest.main()
