import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from data_utils import truth_table, split_inputs_targets


@pytest.fixture
def and_data():
    return split_inputs_targets(truth_table("and"))


@pytest.fixture
def or_data():
    return split_inputs_targets(truth_table("or"))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)
