import pytest

from sample import Sample, UnsupportedLabelCount


class TestSample:
    """Sample construction and read-only access."""

    def test_features_stored_as_float_tuple(self):
        s = Sample([1, 2.5, -3], "red")
        assert s.features == (1.0, 2.5, -3.0)
        assert all(isinstance(v, float) for v in s.features)
        assert s.label == "red"
        assert s.n_features == 3

    def test_features_do_not_follow_caller_list(self):
        feats = [1.0, 2.0]
        s = Sample(feats, "red")
        feats.append(3.0)
        assert s.features == (1.0, 2.0)

    def test_is_read_only(self):
        s = Sample([1.0], "red")
        with pytest.raises(AttributeError):
            s.label = "blue"
        with pytest.raises(AttributeError):
            s.features = (2.0,)

    def test_repr(self):
        assert repr(Sample([0.1, 3.1], "red")) == "Sample([0.1, 3.1], 'red')"


class TestBinaryLabel:
    """Label registry resolution: first seen -> 0, second -> 1."""

    def setup_method(self):
        self.known = []

    def test_first_label_is_zero(self):
        code, known = Sample([1.0], "red").binary_label(self.known)
        assert code == 0
        assert known == ["red"]
        assert known is self.known

    def test_second_label_is_one(self):
        Sample([1.0], "red").binary_label(self.known)
        code, _ = Sample([1.0], "blue").binary_label(self.known)
        assert code == 1
        assert self.known == ["red", "blue"]

    def test_known_labels_are_reused(self):
        Sample([1.0], "red").binary_label(self.known)
        Sample([1.0], "blue").binary_label(self.known)
        assert Sample([2.0], "red").binary_label(self.known)[0] == 0
        assert Sample([2.0], "blue").binary_label(self.known)[0] == 1
        assert self.known == ["red", "blue"]

    def test_repeated_first_label_does_not_grow_registry(self):
        Sample([1.0], "red").binary_label(self.known)
        code, _ = Sample([1.0], "red").binary_label(self.known)
        assert code == 0
        assert self.known == ["red"]

    def test_third_label_raises(self):
        self.known.extend(["red", "blue"])
        with pytest.raises(UnsupportedLabelCount, match="green"):
            Sample([1.0], "green").binary_label(self.known)
        assert self.known == ["red", "blue"]

    def test_unsupported_label_count_is_value_error(self):
        assert issubclass(UnsupportedLabelCount, ValueError)
