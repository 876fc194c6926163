import joblib
import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split
from sklearn.preprocessing import MinMaxScaler

from sample import Sample
from model_perceptron import Perceptron

LABEL_COL = "label"
SEED = 42


def replace_inf_and_impute_median(dset, skip_cols=(LABEL_COL,)):
    dset.replace([np.inf, -np.inf], np.nan, inplace=True)
    for col in dset.columns:
        if col in skip_cols:
            continue
        if pd.api.types.is_numeric_dtype(dset[col]) and dset[col].isna().any():
            dset[col] = dset[col].fillna(dset[col].median())
    return dset


def load_samples_csv(path, label_col=LABEL_COL, feature_cols=None):
    """
    Read a CSV with one row per sample.
    feature_cols defaults to every numeric column except label_col.
    """
    df = pd.read_csv(path)
    if label_col not in df.columns:
        raise ValueError(f"Column {label_col!r} not found in {path}. Columns: {list(df.columns)}")

    if feature_cols is None:
        feature_cols = [
            c for c in df.columns
            if c != label_col and pd.api.types.is_numeric_dtype(df[c])
        ]
    if not feature_cols:
        raise ValueError(f"No numeric feature columns in {path}.")

    replace_inf_and_impute_median(df, skip_cols=(label_col,))
    X = df[feature_cols].to_numpy(dtype=float)
    y = df[label_col].astype(str).tolist()
    return samples_from_arrays(X, y)


def samples_from_arrays(X, y):
    X = np.asarray(X, dtype=float)
    if X.ndim == 1:
        X = X.reshape(-1, 1)
    if len(X) != len(y):
        raise ValueError(f"X has {len(X)} rows but y has {len(y)} labels.")
    return [Sample(xi, yi) for xi, yi in zip(X, y)]


def split_samples(samples, test_size=0.25, seed=SEED):
    samples = list(samples)
    labels = [s.label for s in samples]
    train, test = train_test_split(
        samples, test_size=test_size, random_state=seed, stratify=labels
    )
    return train, test


def scale_samples(train, *others):
    # fit doar pe train, ca sa nu avem leakage
    scaler = MinMaxScaler()
    scaler.fit(np.array([s.features for s in train], dtype=float))

    def _apply(samples):
        if not samples:
            return []
        Xs = scaler.transform(np.array([s.features for s in samples], dtype=float))
        return [Sample(xi, s.label) for xi, s in zip(Xs, samples)]

    return (_apply(train),) + tuple(_apply(o) for o in others) + (scaler,)


def save_model(model, path):
    joblib.dump(
        {
            "learning_rate": model.learning_rate,
            "weights": model.weights,
            "bias": model.bias,
            "labels": model.labels,
        },
        path,
    )
    print("Saved:", path)


def load_model(path):
    state = joblib.load(path)
    model = Perceptron(learning_rate=state["learning_rate"])
    model.weights = state["weights"]
    model.bias = state["bias"]
    model.labels = state["labels"]
    return model
