import importlib

import schedsim


def test_public_modules_import():
    for name in schedsim.__all__:
        module = importlib.import_module(f"schedsim.{name}")
        assert module.__name__ == f"schedsim.{name}"
