# FILE: plot_perceptron.py
# Ploturi pentru perceptron: frontiera de decizie (2 feature-uri) + erori pe epoca.
# Output: perceptron_boundary.png, perceptron_errors.png

import numpy as np
import matplotlib.pyplot as plt

from model_perceptron import Perceptron
from utils_data import samples_from_arrays, split_samples, SEED


def plot_decision_boundary(model, samples, out_png, show=False):
    if len(model.weights) != 2:
        raise ValueError(f"Decision boundary needs a 2-feature model, got {len(model.weights)} features.")

    X = np.array([s.features for s in samples], dtype=float)
    labels = [s.label for s in samples]

    plt.figure(figsize=(6, 5))
    for lab in sorted(set(labels)):
        mask = np.array([l == lab for l in labels])
        plt.scatter(X[mask, 0], X[mask, 1], label=lab, alpha=0.8)

    # w0*x + w1*y + b = 0
    w0, w1 = model.weights
    b = model.bias
    xs = np.linspace(X[:, 0].min() - 0.5, X[:, 0].max() + 0.5, 100)
    if w1 != 0:
        plt.plot(xs, -(w0 * xs + b) / w1, "k--", label="boundary")
    elif w0 != 0:
        plt.axvline(-b / w0, color="k", linestyle="--", label="boundary")

    plt.title("Perceptron: decision boundary")
    plt.xlabel("x0")
    plt.ylabel("x1")
    plt.legend()
    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    if show:
        plt.show()
    plt.close()
    print("Saved:", out_png)


def plot_errors_per_epoch(model, out_png, show=False):
    errors = model.errors_per_epoch
    if not errors:
        print(f"[WARN] No training history, skipping {out_png}.")
        return

    plt.figure()
    plt.plot(np.arange(1, len(errors) + 1), errors, marker="o")
    plt.title("Perceptron: misclassified samples per epoch")
    plt.xlabel("Epoch")
    plt.ylabel("Errors")
    plt.tight_layout()
    plt.savefig(out_png, dpi=150)
    if show:
        plt.show()
    plt.close()
    print("Saved:", out_png)


def make_blobs_2d(n_per_class=40, seed=SEED):
    # doua clustere separabile liniar
    rng = np.random.default_rng(seed)
    a = rng.normal(loc=(-2.0, -2.0), scale=0.6, size=(n_per_class, 2))
    b = rng.normal(loc=(2.0, 2.0), scale=0.6, size=(n_per_class, 2))
    X = np.vstack([a, b])
    y = ["blue"] * n_per_class + ["red"] * n_per_class
    return samples_from_arrays(X, y)


def main():
    print("=== PERCEPTRON: 2D BLOBS ===")
    samples = make_blobs_2d()
    train, test = split_samples(samples, test_size=0.25, seed=SEED)

    p = Perceptron(learning_rate=0.1)
    p.train(train, n_epochs=20, print_every=5)

    print(f"train acc={p.score(train):.2f} | test acc={p.score(test):.2f}")
    print(f"w={p.weights} b={p.bias:.3f}")

    plot_decision_boundary(p, samples, "perceptron_boundary.png", show=True)
    plot_errors_per_epoch(p, "perceptron_errors.png", show=True)


if __name__ == "__main__":
    main()
