"""Insertion sort: shifts larger predecessors right, then drops the key in."""

from __future__ import annotations

from typing import Any, Sequence

from ..algorithm import Complexity, SortingAlgorithm
from ..recorder import TraceRecorder
from ..trace_types import Trace
from .. import constants

_JAVASCRIPT = """\
function insertionSort(arr) {
    const n = arr.length;
    for (let i = 1; i < n; i++) {
        const key = arr[i];
        let j = i - 1;
        while (j >= 0 && arr[j] > key) {
            arr[j + 1] = arr[j];
            j--;
        }
        arr[j + 1] = key;
    }
    return arr;
}"""

_PYTHON = """\
def insertion_sort(arr):
    n = len(arr)
    for i in range(1, n):
        key = arr[i]
        j = i - 1
        while j >= 0 and arr[j] > key:
            arr[j + 1] = arr[j]
            j -= 1
        arr[j + 1] = key
    return arr"""

_JAVA = """\
public static void insertionSort(int[] arr) {
    int n = arr.length;
    for (int i = 1; i < n; i++) {
        int key = arr[i];
        int j = i - 1;
        while (j >= 0 && arr[j] > key) {
            arr[j + 1] = arr[j];
            j--;
        }
        arr[j + 1] = key;
    }
}"""

_CPP = """\
void insertionSort(int arr[], int n) {
    for (int i = 1; i < n; i++) {
        int key = arr[i];
        int j = i - 1;
        while (j >= 0 && arr[j] > key) {
            arr[j + 1] = arr[j];
            j--;
        }
        arr[j + 1] = key;
    }
}"""

LINE_START = 1
LINE_KEY = 4
LINE_COMPARE = 6
LINE_PLACE = 9
LINE_DONE = 10


class InsertionSort(SortingAlgorithm):
    KEY = constants.ALGORITHM_INSERTION
    NAME = "Insertion Sort"

    SOURCE_TEXTS = {
        constants.LANGUAGE_JAVASCRIPT: _JAVASCRIPT,
        constants.LANGUAGE_PYTHON: _PYTHON,
        constants.LANGUAGE_JAVA: _JAVA,
        constants.LANGUAGE_CPP: _CPP,
    }
    LINE_MAPS = {
        constants.LANGUAGE_JAVASCRIPT: {1: 1, 4: 4, 6: 6, 9: 10, 10: 12},
        constants.LANGUAGE_JAVA: {1: 1, 4: 4, 6: 6, 9: 10, 10: 12},
        constants.LANGUAGE_CPP: {1: 1, 4: 3, 6: 5, 9: 9, 10: 11},
    }

    def sort(self, values: Sequence[Any]) -> Trace:
        rec = TraceRecorder(self.KEY)
        arr = list(values)
        n = len(arr)

        rec.mark_sorted(range(min(n, 1)))
        rec.record(arr, "The first element is trivially sorted", LINE_START)

        for i in range(1, n):
            key = arr[i]
            j = i - 1
            rec.record(arr, f"Key: {key}", LINE_KEY, current=i)

            # Shifts move values one slot right; they are not swaps.
            while j >= 0:
                rec.compare()
                if arr[j] > key:
                    rec.record(
                        arr,
                        f"{arr[j]} > {key}, shifting right",
                        LINE_COMPARE,
                        comparing=(j, j + 1),
                        current=i,
                    )
                    arr[j + 1] = arr[j]
                    j -= 1
                else:
                    rec.record(
                        arr,
                        f"{arr[j]} <= {key}, stopping",
                        LINE_COMPARE,
                        comparing=(j, j + 1),
                        current=i,
                    )
                    break

            arr[j + 1] = key
            rec.mark_sorted(range(i + 1))
            rec.record(
                arr, f"{key} placed at index {j + 1}", LINE_PLACE, current=j + 1
            )

        return rec.finish(arr, "Sorting complete!", LINE_DONE)

    def complexity(self) -> Complexity:
        return Complexity(best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)")
