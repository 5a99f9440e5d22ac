"""Traced sorting algorithm variants and their registry."""

from __future__ import annotations

import importlib

from ..algorithm import SortingAlgorithm

# Lazy imports keep unused variants out of startup
_ALGORITHM_CLASSES: dict[str, str] = {
    "bubble": "bubble.BubbleSort",
    "insertion": "insertion.InsertionSort",
    "selection": "selection.SelectionSort",
    "merge": "merge.MergeSort",
    "quick": "quick.QuickSort",
}


def get_algorithm(key: str) -> SortingAlgorithm:
    """Instantiate the algorithm registered under *key*.

    Raises ``ValueError`` if *key* has no registered algorithm.
    """
    target = _ALGORITHM_CLASSES.get(key)
    if target is None:
        raise ValueError(f"Unknown algorithm: {key}")
    module_name, class_name = target.split(".")
    mod = importlib.import_module(f".{module_name}", package=__package__)
    cls = getattr(mod, class_name)
    return cls()


SUPPORTED_ALGORITHMS: tuple[str, ...] = tuple(_ALGORITHM_CLASSES.keys())

__all__ = [
    "SortingAlgorithm",
    "get_algorithm",
    "SUPPORTED_ALGORITHMS",
]
