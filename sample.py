# FILE: sample.py
# Sample = un vector de feature-uri + eticheta (string) pentru perceptron.
# Eticheta se transforma in 0/1 dupa ordinea in care apar etichetele distincte.


class UnsupportedLabelCount(ValueError):
    """Raised when a training set holds more than two distinct labels."""


class Sample:
    """
    One labeled data point:
      features -> tuple of floats (fixed length per training set)
      label    -> any string, e.g. "red" / "blue"
    Read-only after construction.
    """

    __slots__ = ("_features", "_label")

    def __init__(self, features, label):
        self._features = tuple(float(v) for v in features)
        self._label = str(label)

    @property
    def features(self):
        return self._features

    @property
    def label(self):
        return self._label

    @property
    def n_features(self):
        return len(self._features)

    def binary_label(self, known_labels):
        """
        Map this sample's label to 0 or 1.

        known_labels is the registry of distinct labels seen so far (first -> 0,
        second -> 1). A new label is appended while there is room for it.
        Returns (class_code, known_labels).
        """
        if self._label in known_labels:
            return known_labels.index(self._label), known_labels

        if len(known_labels) >= 2:
            raise UnsupportedLabelCount(
                f"label {self._label!r} is a third class; already seen {known_labels[0]!r} and {known_labels[1]!r}"
            )

        known_labels.append(self._label)
        return len(known_labels) - 1, known_labels

    def __repr__(self):
        return f"Sample({list(self._features)!r}, {self._label!r})"
