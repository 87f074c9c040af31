# src/report.py
"""
Reportes del perceptrón sobre los pesos actuales: resultados por patrón,
aciertos, mensajes de inicio/fin del entrenamiento y curva MSE por época.
Nada de lo que hay aquí modifica el perceptrón.
"""

import numpy as np

from trainer import compute_mse


def format_weights(w) -> str:
    """[w1, w2, ...] con 4 decimales."""
    return "[" + ", ".join(f"{v:.4f}" for v in np.asarray(w, dtype=float).reshape(-1)) + "]"


def detailed_results(perceptron, X, d):
    """
    Recalcula, para cada patrón, la suma ponderada, la salida sigmoide y la
    predicción con los pesos actuales. No modifica el perceptrón.
    """
    X = np.asarray(X, dtype=float)
    d = np.asarray(d, dtype=float).reshape(-1)
    if X.shape[0] != d.shape[0]:
        raise ValueError(f"X y d deben tener el mismo número de patrones, got {X.shape[0]} y {d.shape[0]}")

    rows = []
    for x, expected in zip(X, d):
        output = perceptron.calculate_output(x)
        rows.append({
            "inputs": x.tolist(),
            "weighted_sum": perceptron.weighted_sum(x),
            "output": output,
            "prediction": 1 if output >= 0.5 else 0,
            "expected": int(expected)
        })
    return rows


def accuracy(perceptron, X, d):
    """Devuelve (aciertos, total)."""
    rows = detailed_results(perceptron, X, d)
    aciertos = sum(1 for r in rows if r["prediction"] == r["expected"])
    return aciertos, len(rows)


def print_training_start(perceptron):
    print("Iniciando entrenamiento del perceptron " +
          ("con sesgo..." if perceptron.use_bias else "sin sesgo..."))
    print(f"Pesos iniciales: {format_weights(perceptron.weights)}")
    if perceptron.use_bias:
        print(f"Sesgo inicial: {perceptron.bias:.4f}")


def print_training_end(perceptron, history):
    print(f"Entrenamiento completado en {history['epochs']} epocas.")
    print(f"Pesos finales: {format_weights(perceptron.weights)}")
    if perceptron.use_bias:
        print(f"Sesgo final: {perceptron.bias:.4f}")


def print_results(perceptron, X, d):
    rows = detailed_results(perceptron, X, d)
    print("\n--- Resultados detallados ---")
    for r in rows:
        # entradas binarias, se muestran como enteros
        print("Entradas: [" + ", ".join(str(int(v)) for v in r["inputs"]) + "]")
        if perceptron.use_bias:
            print(f"Suma Ponderada = {r['weighted_sum']:.4f} (incluye sesgo: {perceptron.bias:.4f})")
        else:
            print(f"Suma Ponderada = {r['weighted_sum']:.4f}")
        print(f"Funcion de Activacion (Sigmoid) = {r['output']:.4f}")
        print(f"Prediccion: {r['prediction']}, Esperado: {r['expected']}")
        print("------------------------")

    if not rows:
        return

    aciertos, total = accuracy(perceptron, X, d)
    print(f"Precisión: {aciertos}/{total} ({(aciertos/total)*100:.2f}%)")
    print(f"MSE: {compute_mse([r['expected'] for r in rows], [r['output'] for r in rows]):.6f}")


def plot_mse_history(history, ax=None, title="MSE por época", label=None):
    """Dibuja la curva MSE vs época del historial devuelto por train_perceptron."""
    import matplotlib.pyplot as plt

    if ax is None:
        _, ax = plt.subplots(figsize=(6, 3))
    mse = history["mse"]
    ax.plot(range(1, len(mse) + 1), mse, '-', label=label)
    ax.set_xlabel("Época")
    ax.set_ylabel("MSE")
    ax.set_title(title)
    if label is not None:
        ax.legend()
    return ax
