"""
Provide general fixtures for the test suite.
"""
import numpy as np
import pytest

from pathlib import Path

from maxvalues.configtools import write_yaml


SEED: int = 1701


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(SEED)


@pytest.fixture
def random_integers(rng) -> list[int]:
    """Integers with plenty of duplicates."""
    return rng.integers(-50, 50, size=500).tolist()


@pytest.fixture
def random_floats(rng) -> list[float]:
    return rng.normal(size=500).tolist()


@pytest.fixture(scope='module')
def worked_example() -> list[int]:
    return [1, 5, 2, 4, 7, 10, 0, 15, 3]


@pytest.fixture
def valuefile(tmp_path, worked_example) -> Path:
    """Whitespace-separated values spread over multiple lines."""
    fpath = tmp_path / 'values.txt'
    tokens = [str(v) for v in worked_example]
    with fpath.open(mode='w') as handle:
        handle.write(' '.join(tokens[:4]) + '\n')
        handle.write('\t'.join(tokens[4:]) + '\n\n')
    return fpath


@pytest.fixture
def configuration_factory(tmp_path):
    """Write configuration mappings as YAML files into the temporary directory."""
    counter = 0

    def _write(content: dict) -> Path:
        nonlocal counter
        counter += 1
        return write_yaml(content, tmp_path / f'configuration-{counter}.yaml')

    return _write
