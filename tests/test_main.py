import matplotlib.pyplot as plt

import main


def test_run_gate_returns_trained_perceptron(capsys):
    perceptron, history = main.run_gate("or", True, seed=11, max_epochs=10000)
    out = capsys.readouterr().out
    assert perceptron.use_bias is True
    assert history["epochs"] <= 10000
    assert f"Entrenamiento completado en {history['epochs']} epocas." in out
    assert [perceptron.predict(x) for x in ([0, 0], [0, 1], [1, 0], [1, 1])] == [0, 1, 1, 1]


def test_main_runs_both_examples(capsys):
    runs = main.main(seed=3)
    out = capsys.readouterr().out
    assert "=== PERCEPTRON SIN SESGO PARA COMPUERTA AND ===" in out
    assert "=== PERCEPTRON CON SESGO PARA COMPUERTA OR ===" in out
    assert out.index("SIN SESGO") < out.index("CON SESGO")
    assert out.count("--- Resultados detallados ---") == 2
    assert [(gate, use_bias) for gate, use_bias, _ in runs] == [("and", False), ("or", True)]


def test_main_is_reproducible_with_seed(capsys):
    first = main.main(seed=21)
    second = main.main(seed=21)
    capsys.readouterr()
    assert [h["mse"] for _, _, h in first] == [h["mse"] for _, _, h in second]


def test_main_plot(monkeypatch, capsys):
    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))
    main.main(seed=4, show_plot=True)
    capsys.readouterr()
    assert shown == [True]
    plt.close("all")
