import logging
import math
import numbers

import numpy as np

logger = logging.getLogger(__name__)


class NetworkError(Exception):
    """Base class for errors raised by the network."""


class ShapeMismatch(NetworkError, ValueError):
    """A vector or dataset does not have the length the network expects."""


class ConfigurationError(NetworkError, ValueError):
    """The network was asked to take a shape or setting it cannot have."""


def as_vector(values, expected, what="inputs"):
    try:
        x = np.asarray(values, dtype=float)
    except (TypeError, ValueError) as e:
        raise ShapeMismatch(f"{what} must be a flat vector of numbers") from e
    if x.ndim != 1:
        raise ShapeMismatch(f"{what} must be a flat vector, got shape {x.shape}")
    if len(x) != expected:
        raise ShapeMismatch(f"expected {expected} {what}, got {len(x)}")
    return x


def is_count(value):
    # bool is an Integral, but True is not a size
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


class Neuron:
    def __init__(self, n_inputs, activation, rng):
        self.weights = rng.uniform(-0.5, 0.5, n_inputs)
        self.bias = float(rng.uniform(-0.5, 0.5))
        self.activation = activation
        self.last_output = None
        self.delta = 0.0

    def compute(self, inputs):
        if len(inputs) != len(self.weights):
            raise ShapeMismatch(f"neuron has {len(self.weights)} weights, got {len(inputs)} inputs")
        z = self.bias + np.dot(self.weights, inputs)
        self.last_output = float(self.activation.activate(z))
        return self.last_output

    def apply_gradient_step(self, delta, learning_rate, previous_activations):
        """
        Store delta and move weights and bias along it.
        previous_activations: what this neuron saw on its inputs during the forward pass
        """
        if len(previous_activations) != len(self.weights):
            raise ShapeMismatch(
                f"neuron has {len(self.weights)} weights, got {len(previous_activations)} activations"
            )
        self.delta = delta
        self.weights += learning_rate * delta * np.asarray(previous_activations, dtype=float)
        self.bias += learning_rate * delta


class Layer:
    def __init__(self, n_inputs, n_neurons, activation, rng):
        if not (is_count(n_inputs) and is_count(n_neurons)):
            raise ConfigurationError(
                f"layer sizes must be integers, got {n_inputs!r} inputs and {n_neurons!r} neurons"
            )
        if n_inputs < 1 or n_neurons < 1:
            raise ConfigurationError(
                f"a layer needs at least one input and one neuron, got {n_inputs} inputs and {n_neurons} neurons"
            )
        self.input_count = n_inputs
        self.activation = activation
        self.neurons = [Neuron(n_inputs, activation, rng) for _ in range(n_neurons)]

    def __len__(self):
        return len(self.neurons)

    def compute(self, inputs):
        inputs = as_vector(inputs, self.input_count)
        return np.array([neuron.compute(inputs) for neuron in self.neurons])


class Network:
    def __init__(self, input_count, hidden_sizes, output_count, hidden_activation,
                 output_activation=None, learning_rate=0.1, rng=None, seed=None):
        """
        Sizes become [input_count, *hidden_sizes, output_count],
        e.g. 1, [2], 1 means: 1 input -> 2 hidden neurons -> 1 output.
        Every layer but the last uses hidden_activation; the last one uses
        output_activation, falling back to hidden_activation.
        rng: numpy Generator used for weight init, built from seed when omitted
        """
        valid_rate = (isinstance(learning_rate, numbers.Real) and not isinstance(learning_rate, bool)
                      and math.isfinite(learning_rate) and learning_rate > 0)
        if not valid_rate:
            raise ConfigurationError(f"learning rate must be a finite positive number, got {learning_rate!r}")
        sizes = [input_count, *hidden_sizes, output_count]
        if not all(is_count(size) for size in sizes):
            raise ConfigurationError(f"every layer size must be an integer, got {sizes}")
        if any(size < 1 for size in sizes):
            raise ConfigurationError(f"every layer size must be at least 1, got {sizes}")

        if output_activation is None:
            output_activation = hidden_activation
        if rng is None:
            rng = np.random.default_rng(seed)

        self.input_count = input_count
        self.output_count = output_count
        self.learning_rate = float(learning_rate)
        self.layers = []
        for i in range(1, len(sizes)):
            activation = output_activation if i == len(sizes) - 1 else hidden_activation
            self.layers.append(Layer(sizes[i - 1], sizes[i], activation, rng))

        logger.debug("Built network %s, learning rate %s", sizes, self.learning_rate)

    def feed_forward(self, inputs):
        x = as_vector(inputs, self.input_count)
        for layer in self.layers:
            x = layer.compute(x)
        return x

    def predict(self, inputs):
        """Inference only, same as feed_forward."""
        return self.feed_forward(inputs)

    def back_propagate(self, inputs, targets):
        """
        One online gradient descent step on a single example.
        Returns the prediction made before the update.
        """
        inputs = as_vector(inputs, self.input_count)
        targets = as_vector(targets, self.output_count, "targets")

        # inputs act as the output of a virtual layer 0
        layers_output = [inputs]
        x = inputs
        for layer in self.layers:
            x = layer.compute(x)
            layers_output.append(x)
        prediction = x

        for layer_idx in reversed(range(len(self.layers))):
            layer = self.layers[layer_idx]
            layer_output = layers_output[layer_idx + 1]
            layer_input = layers_output[layer_idx]

            if layer_idx == len(self.layers) - 1:
                errors = targets - layer_output
            else:
                next_neurons = self.layers[layer_idx + 1].neurons
                errors = [sum(next_neuron.weights[neuron_idx] * next_neuron.delta for next_neuron in next_neurons)
                          for neuron_idx in range(len(layer.neurons))]

            for neuron_idx, neuron in enumerate(layer.neurons):
                delta = errors[neuron_idx] * neuron.activation.derivative(neuron.last_output)
                neuron.apply_gradient_step(float(delta), self.learning_rate, layer_input)

        return prediction

    def train(self, x_examples, y_examples, epochs, log_interval=0):
        """
        Run back_propagate over every example, in order, for each epoch.
        Returns the mean squared error of each epoch.
        """
        if len(x_examples) != len(y_examples):
            raise ShapeMismatch(f"got {len(x_examples)} input examples but {len(y_examples)} targets")
        if not is_count(epochs):
            raise ConfigurationError(f"epochs must be an integer, got {epochs!r}")
        if epochs < 0:
            raise ConfigurationError(f"epochs must not be negative, got {epochs}")
        # every example is checked before any weight moves
        x_examples = [as_vector(x, self.input_count) for x in x_examples]
        y_examples = [as_vector(y, self.output_count, "targets") for y in y_examples]

        history = []
        for epoch in range(epochs):
            total_loss = 0.0
            for x, y in zip(x_examples, y_examples):
                pred = self.back_propagate(x, y)
                total_loss += np.mean((y - pred) ** 2)

            avg_loss = total_loss / len(x_examples) if len(x_examples) else 0.0
            history.append(float(avg_loss))
            if log_interval and ((epoch + 1) % log_interval == 0 or epoch == 0):
                logger.info("Epoch %d/%d, Loss: %.6f", epoch + 1, epochs, avg_loss)

        return history

    def mean_squared_error(self, x_examples, y_examples):
        if len(x_examples) != len(y_examples):
            raise ShapeMismatch(f"got {len(x_examples)} input examples but {len(y_examples)} targets")
        if not len(x_examples):
            return 0.0
        total_loss = 0.0
        for x, y in zip(x_examples, y_examples):
            target = as_vector(y, self.output_count, "targets")
            total_loss += np.mean((target - self.feed_forward(x)) ** 2)
        return float(total_loss / len(x_examples))
