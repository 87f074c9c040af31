# src/perceptron.py
"""
Perceptrón de una neurona con activación sigmoide, con o sin sesgo.

Los pesos viven en un numpy array que el entrenamiento modifica en el lugar;
la longitud nunca cambia. El sesgo solo participa si use_bias es True.
"""

import numpy as np
from typing import Callable, Optional, Dict, Any

import report
from trainer import sigmoid, train_perceptron


class Perceptron:
    def __init__(self, input_size: int, learning_rate: float = 0.1, use_bias: bool = True,
                 rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        if input_size <= 0:
            raise ValueError(f"input_size debe ser > 0, got {input_size}")
        if learning_rate <= 0:
            raise ValueError(f"learning_rate debe ser > 0, got {learning_rate}")

        if rng is None:
            rng = np.random.default_rng(seed)

        self._learning_rate = float(learning_rate)
        self._use_bias = bool(use_bias)

        # pesos y sesgo aleatorios en [-1, 1)
        self.weights = rng.uniform(-1.0, 1.0, size=input_size)
        self.bias = float(rng.uniform(-1.0, 1.0)) if self._use_bias else 0.0

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def use_bias(self) -> bool:
        return self._use_bias

    @property
    def input_size(self) -> int:
        return self.weights.shape[0]

    def _check_inputs(self, inputs) -> np.ndarray:
        x = np.asarray(inputs, dtype=float).reshape(-1)
        if x.shape[0] != self.input_size:
            raise ValueError(f"Se esperaban {self.input_size} entradas, got {x.shape[0]}")
        return x

    def weighted_sum(self, inputs) -> float:
        """Suma ponderada w1*x1 + w2*x2 + ... (+ bias si corresponde)."""
        x = self._check_inputs(inputs)
        total = self.bias if self._use_bias else 0.0
        return float(total + x @ self.weights)

    def calculate_output(self, inputs) -> float:
        """Salida del perceptrón, un valor entre 0 y 1."""
        return float(sigmoid(self.weighted_sum(inputs)))

    def predict(self, inputs) -> int:
        """Clasificación binaria: 1 si la salida es >= 0.5, 0 en caso contrario."""
        return 1 if self.calculate_output(inputs) >= 0.5 else 0

    def train(self, data, targets, max_epochs: int = 10000, error_threshold: float = 0.01,
              callback: Optional[Callable[[int, float, np.ndarray, float], None]] = None,
              verbose: bool = False, progress_every: int = 100) -> Dict[str, Any]:
        """
        Entrena con el dataset completo (mismo orden en cada época) hasta que
        MSE < error_threshold o se alcanza max_epochs. Devuelve el historial
        de train_perceptron.
        """
        X = np.asarray(data, dtype=float)
        d = np.asarray(targets, dtype=float).reshape(-1)
        if X.ndim != 2 or X.shape[0] != d.shape[0]:
            raise ValueError(f"data y targets deben tener el mismo número de patrones, "
                             f"got {len(data)} y {d.shape[0]}")
        if X.shape[1] != self.input_size:
            raise ValueError(f"Cada patrón debe tener {self.input_size} entradas, got {X.shape[1]}")

        history = train_perceptron(X, d, self.weights, self.bias,
                                   eta=self._learning_rate, use_bias=self._use_bias,
                                   max_epochs=max_epochs, error_threshold=error_threshold,
                                   callback=callback, verbose=verbose,
                                   progress_every=progress_every)
        self.bias = history["bias"]
        return history

    def print_results(self, data, expected_outputs):
        report.print_results(self, data, expected_outputs)

    def __repr__(self):
        return (f"Perceptron(weights={np.array2string(self.weights, precision=4)}, "
                f"bias={self.bias:.4f}, learning_rate={self._learning_rate}, use_bias={self._use_bias})")
