"""
Ejemplos del perceptrón sigmoide:
- Perceptrón SIN sesgo para la compuerta AND
- Perceptrón CON sesgo para la compuerta OR
Requisitos: python 3.8+, numpy, pandas, matplotlib.
"""

import numpy as np

import report
from data_utils import truth_table, split_inputs_targets
from perceptron import Perceptron

TITLES = {
    ("and", False): "=== PERCEPTRON SIN SESGO PARA COMPUERTA AND ===",
    ("or", True): "=== PERCEPTRON CON SESGO PARA COMPUERTA OR ===",
}


def run_gate(gate, use_bias, learning_rate=0.1, seed=None, rng=None,
             max_epochs=10000, error_threshold=0.01, verbose=True):
    """Entrena un perceptrón para la compuerta y muestra el reporte completo."""
    X, d = split_inputs_targets(truth_table(gate))

    perceptron = Perceptron(X.shape[1], learning_rate, use_bias, rng=rng, seed=seed)
    report.print_training_start(perceptron)
    history = perceptron.train(X, d, max_epochs=max_epochs, error_threshold=error_threshold,
                               verbose=verbose)
    report.print_training_end(perceptron, history)
    perceptron.print_results(X, d)
    return perceptron, history


def main(seed=None, show_plot=False):
    rng = np.random.default_rng(seed)
    runs = []
    for i, (gate, use_bias) in enumerate(TITLES):
        if i > 0:
            print("\n")
        print(TITLES[(gate, use_bias)])
        # ambos perceptrones comparten el generador para que una semilla fije toda la corrida
        _, history = run_gate(gate, use_bias, rng=rng)
        runs.append((gate, use_bias, history))

    if show_plot:
        import matplotlib.pyplot as plt

        fig, ax = plt.subplots(figsize=(7, 4))
        for gate, use_bias, history in runs:
            label = f"{gate.upper()} {'con' if use_bias else 'sin'} sesgo"
            report.plot_mse_history(history, ax=ax, label=label)
        plt.show()
    return runs


if __name__ == "__main__":
    main(show_plot=True)
