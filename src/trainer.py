# src/trainer.py
"""
Trainer para un perceptrón de una neurona con activación sigmoide.
Función principal: train_perceptron(X, d, w, bias, eta, use_bias, max_epochs, error_threshold,
                                    callback=None, verbose=False, progress_every=100)

- X: numpy array shape (N, n_inputs)  (SIN bias)
- d: numpy array shape (N,) con valores 0/1
- w: numpy array shape (n_inputs,)  (se modifica en el lugar)
- bias: float (solo se usa si use_bias es True)
- eta: learning rate (float)
- max_epochs: máximo de épocas (int)
- error_threshold: el entrenamiento para cuando MSE < error_threshold
- callback: función opcional con firma callback(epoch, mse, w, bias)
            llamada al final de cada época.
- verbose: imprime progreso cada `progress_every` épocas si True

Devuelve:
    history: dict { "mse": list_of_mse, "w": final_weights, "bias": final_bias,
                    "epochs": n_epochs_done, "converged": bool, "state": str }
"""

import numpy as np
from typing import Callable, Optional, Dict, Any

CONVERGED = "converged"
EPOCH_CAP_REACHED = "epoch_cap_reached"

# límite del argumento de exp() para no desbordar
SIGMOID_CLIP = 500.0
# la salida queda estrictamente dentro de (0, 1)
OUTPUT_MIN = np.nextafter(0.0, 1.0)
OUTPUT_MAX = np.nextafter(1.0, 0.0)


def sigmoid(x):
    """Función sigmoide 1/(1 + e^-x). Acepta escalares o arrays."""
    x = np.clip(x, -SIGMOID_CLIP, SIGMOID_CLIP)
    return np.clip(1.0 / (1.0 + np.exp(-x)), OUTPUT_MIN, OUTPUT_MAX)


def sigmoid_derivative(output):
    """Derivada de la sigmoide expresada con su salida: y * (1 - y)"""
    return output * (1.0 - output)


def compute_mse(d: np.ndarray, y: np.ndarray) -> float:
    """MSE = mean over all elements (d - y)^2"""
    diff = np.asarray(d, dtype=float) - np.asarray(y, dtype=float)
    return float(np.mean(np.square(diff)))


def train_perceptron(
    X: np.ndarray,
    d: np.ndarray,
    w: np.ndarray,
    bias: float = 0.0,
    eta: float = 0.1,
    use_bias: bool = True,
    max_epochs: int = 10000,
    error_threshold: float = 0.01,
    callback: Optional[Callable[[int, float, np.ndarray, float], None]] = None,
    verbose: bool = False,
    progress_every: int = 100
) -> Dict[str, Any]:
    """
    Entrena por patrón (online) con descenso de gradiente sobre el error cuadrático.
    Actualizaciones (por patrón i, siempre en el mismo orden):
      net = x_i @ w (+ bias)
      y = sigmoid(net)
      e = d_i - y
      w += eta * e * y * (1 - y) * x_i
      bias += eta * e * y * (1 - y)      (solo con sesgo)

    Al final de cada época MSE = suma(e^2) / N. Si MSE < error_threshold el
    entrenamiento termina (converged); si no, sigue hasta max_epochs.
    """
    # Validaciones de forma
    X = np.asarray(X, dtype=float)
    d = np.asarray(d, dtype=float).reshape(-1)
    if X.ndim != 2:
        raise ValueError(f"X debe ser 2D (N, n_inputs), got shape {X.shape}")
    N, n_inputs = X.shape
    if N == 0:
        raise ValueError("El dataset no tiene patrones")
    if d.shape != (N,):
        raise ValueError(f"d debe tener {N} salidas (una por patrón), got {d.shape[0]}")
    if w.shape != (n_inputs,):
        raise ValueError(f"weights w shape debe ser (n_inputs,) = ({n_inputs},), got {w.shape}")
    if not np.issubdtype(w.dtype, np.floating):
        raise ValueError(f"weights w debe ser un array de floats, got dtype {w.dtype}")
    if max_epochs <= 0:
        raise ValueError(f"max_epochs debe ser > 0, got {max_epochs}")
    if error_threshold < 0:
        raise ValueError(f"error_threshold debe ser >= 0, got {error_threshold}")
    if progress_every <= 0:
        raise ValueError(f"progress_every debe ser > 0, got {progress_every}")

    bias = float(bias) if use_bias else 0.0
    mse_history = []
    epoch = 0
    converged = False

    while not converged and epoch < max_epochs:
        total_error = 0.0

        for x_i, d_i in zip(X, d):
            net = x_i @ w + bias
            y_i = sigmoid(net)
            e = d_i - y_i
            total_error += e ** 2

            delta = eta * e * sigmoid_derivative(y_i)
            w += delta * x_i
            if use_bias:
                bias += delta

        mse = float(total_error / N)
        mse_history.append(mse)
        epoch += 1
        converged = mse < error_threshold

        if callback is not None:
            callback(epoch, mse, w.copy(), bias)

        if verbose and epoch % progress_every == 0:
            print(f"Epoca {epoch}, Error: {mse}")

    history = {
        "mse": mse_history,
        "w": w.copy(),
        "bias": float(bias),
        "epochs": epoch,
        "converged": converged,
        "state": CONVERGED if converged else EPOCH_CAP_REACHED
    }
    return history
