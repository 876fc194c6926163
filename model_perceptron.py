# FILE: model_perceptron.py
# Perceptron FROM SCRATCH (numpy) pentru clasificare binara cu etichete string.
# Regula clasica: la o greseala, w += lr * (target - pred) * x si b += lr * (target - pred).
# Demo: porti logice AND / OR / XOR -> metrics_perceptron.csv

import numpy as np
import pandas as pd

from sklearn.metrics import accuracy_score, confusion_matrix

from sample import Sample


LEARNING_RATE = 1.0
N_EPOCHS = 10


class DimensionMismatch(ValueError):
    """Raised when a feature vector's length differs from the weight vector's."""


class NotTrainedError(RuntimeError):
    """Raised when parameters or labels are needed before they exist."""


def step(x):
    # hard threshold, ties go to class 0
    return 1 if x > 0 else 0


def dot(weights, features):
    x = np.asarray(features, dtype=float)
    if x.ndim != 1 or x.shape[0] != weights.shape[0]:
        raise DimensionMismatch(
            f"expected {weights.shape[0]} features, got shape {x.shape}"
        )
    return float(np.dot(weights, x))


class Perceptron:
    """
    Single-layer perceptron with a step activation.

    Weights start as all ones and the bias as zero. Dimensionality is either
    given up front (n_features) or taken from the first sample on train().
    Training is online: each misclassified sample moves the parameters
    immediately, in the order the samples are given.
    """

    def __init__(self, learning_rate=LEARNING_RATE, n_features=None):
        self.learning_rate = learning_rate
        self.w = None
        self.b = None
        self._labels = []
        self.errors_per_epoch = []

        if n_features is not None:
            self.initialize_params(n_features)

    # -----------------------------
    # parameters
    # -----------------------------
    @property
    def learning_rate(self):
        return self._lr

    @learning_rate.setter
    def learning_rate(self, value):
        value = float(value)
        if not value > 0:
            raise ValueError(f"learning_rate must be positive, got {value}")
        self._lr = value

    @property
    def weights(self):
        if self.w is None:
            raise NotTrainedError(".train() must be called before 'weights' can be accessed")
        return self.w.tolist()

    @weights.setter
    def weights(self, value):
        w = np.array(value, dtype=float)
        if w.ndim != 1:
            raise ValueError(f"weights must be a flat sequence, got shape {w.shape}")
        self.w = w

    @property
    def bias(self):
        if self.b is None:
            raise NotTrainedError(".train() must be called before 'bias' can be accessed")
        return self.b

    @bias.setter
    def bias(self, value):
        self.b = float(value)

    @property
    def labels(self):
        return list(self._labels)

    @labels.setter
    def labels(self, value):
        value = [str(v) for v in value]
        if len(value) > 2 or len(set(value)) != len(value):
            raise ValueError(f"labels must be at most two distinct strings, got {value}")
        self._labels = value

    def initialize_params(self, n_features):
        n_features = int(n_features)
        if n_features < 1:
            # a Sample([], label) ends up here on lazy init
            raise ValueError(f"n_features must be at least 1, got {n_features} (samples need at least one feature)")
        self.w = np.ones(n_features, dtype=float)
        self.b = 0.0

    def _check_initialized(self):
        if self.w is None or self.b is None:
            raise NotTrainedError(".train() must be called before predicting")

    # -----------------------------
    # inference
    # -----------------------------
    def classify(self, features):
        self._check_initialized()
        return step(dot(self.w, features) + self.b)

    def predict(self, features):
        if not self._labels:
            raise NotTrainedError(".train() must be called before predicting")
        code = self.classify(features)
        if code >= len(self._labels):
            raise NotTrainedError(
                f"class {code} has no label, training only saw {self._labels}"
            )
        return self._labels[code]

    def score(self, samples):
        samples = list(samples)
        y_true = [s.label for s in samples]
        y_pred = [self.predict(s.features) for s in samples]
        return float(accuracy_score(y_true, y_pred))

    # -----------------------------
    # training
    # -----------------------------
    def train(self, samples, n_epochs=N_EPOCHS, reinitialize_params=False, print_every=None):
        if isinstance(n_epochs, bool) or not isinstance(n_epochs, (int, np.integer)):
            raise ValueError(f"n_epochs must be an integer, got {n_epochs!r}")
        if n_epochs < 0:
            raise ValueError(f"n_epochs must be >= 0, got {n_epochs}")

        samples = list(samples)
        if samples and (reinitialize_params or self.w is None):
            self.initialize_params(samples[0].n_features)

        known_labels = []
        self.errors_per_epoch = []

        for ep in range(1, n_epochs + 1):
            errors = self._train_one_epoch(samples, known_labels)
            self.errors_per_epoch.append(errors)

            if print_every and (ep % print_every == 0 or ep == 1 or ep == n_epochs):
                print(f"Epoch {ep:4d} | errors={errors}")

        if known_labels:
            self._labels = known_labels

    def _train_one_epoch(self, samples, known_labels):
        errors = 0
        for sample in samples:
            if self._update_params(sample, known_labels):
                errors += 1
        return errors

    def _update_params(self, sample, known_labels):
        target, _ = sample.binary_label(known_labels)
        predicted = self.classify(sample.features)
        if predicted == target:
            return False

        # +lr on a false negative, -lr on a false positive
        change = self._lr * (target - predicted)
        self.w += change * np.asarray(sample.features, dtype=float)
        self.b += change
        return True


def eval_metrics(model, samples, name):
    samples = list(samples)
    labels = model.labels
    y_true = [s.label for s in samples]
    y_pred = [model.predict(s.features) for s in samples]

    acc = float(accuracy_score(y_true, y_pred))
    cm = confusion_matrix(y_true, y_pred, labels=labels)
    print(f"{name} -> acc={acc:.2f} | labels={labels} | confusion={cm.tolist()}")
    return {"accuracy": acc, "confusion": cm}


def gate_samples(X, y):
    return [Sample(xi, "on" if yi else "off") for xi, yi in zip(X, y)]


def run_gate(name, X, y, lr=LEARNING_RATE, n_epochs=N_EPOCHS):
    p = Perceptron(learning_rate=lr)
    samples = gate_samples(X, y)
    p.train(samples, n_epochs)
    m = eval_metrics(p, samples, name)
    print(f"{name} -> w={p.weights} b={p.bias:.3f} errors/epoch={p.errors_per_epoch}")
    return {
        "gate": name,
        "accuracy": m["accuracy"],
        "weights": p.weights,
        "bias": p.bias,
        "last_epoch_errors": p.errors_per_epoch[-1] if p.errors_per_epoch else np.nan,
    }


def main():
    print("=== PERCEPTRON FROM SCRATCH (LOGIC GATES) ===")

    # off first so the registry maps off -> 0 and on -> 1
    X = np.array([
        [0, 0],
        [0, 1],
        [1, 0],
        [1, 1],
    ], dtype=float)

    y_and = np.array([0, 0, 0, 1])
    y_or  = np.array([0, 1, 1, 1])
    y_xor = np.array([0, 1, 1, 0])

    rows = [
        run_gate("AND", X, y_and),
        run_gate("OR",  X, y_or),
        run_gate("XOR (should fail)", X, y_xor),
    ]

    pd.DataFrame(rows).to_csv("metrics_perceptron.csv", index=False)
    print("Saved: metrics_perceptron.csv")


if __name__ == "__main__":
    main()
