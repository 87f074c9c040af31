# src/data_utils.py
import pandas as pd

TRUTH_INPUTS = [
    [0, 0],
    [0, 1],
    [1, 0],
    [1, 1],
]
AND_TARGETS = [0, 0, 0, 1]
OR_TARGETS = [0, 1, 1, 1]

GATES = {
    "and": AND_TARGETS,
    "or": OR_TARGETS,
}


def truth_table(gate: str) -> pd.DataFrame:
    """Tabla de verdad de la compuerta como DataFrame con columnas x1, x2, target."""
    key = gate.lower()
    if key not in GATES:
        raise ValueError(f"Compuerta no soportada: {gate} (use {', '.join(GATES)})")
    df = pd.DataFrame(TRUTH_INPUTS, columns=["x1", "x2"])
    df["target"] = GATES[key]
    return df


def split_inputs_targets(df: pd.DataFrame):
    """(X, d) a partir del DataFrame; la última columna es la salida deseada."""
    if df.shape[1] < 2:
        raise ValueError(f"Se necesitan columnas de entrada y una de salida, got {list(df.columns)}")
    X = df.iloc[:, :-1].to_numpy(dtype=float)   # (N, n_inputs)
    d = df.iloc[:, -1].to_numpy(dtype=float)    # (N,)
    return X, d
