"""Selection sort with at most one swap per position."""

from __future__ import annotations

from typing import Any, Sequence

from ..algorithm import Complexity, SortingAlgorithm
from ..recorder import TraceRecorder
from ..trace_types import Trace
from .. import constants

_JAVASCRIPT = """\
function selectionSort(arr) {
    const n = arr.length;
    for (let i = 0; i < n - 1; i++) {
        let minIdx = i;
        for (let j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIdx]) {
                minIdx = j;
            }
        }
        if (minIdx !== i) {
            [arr[i], arr[minIdx]] = [arr[minIdx], arr[i]];
        }
    }
    return arr;
}"""

_PYTHON = """\
def selection_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if arr[j] < arr[min_idx]:
                min_idx = j
        if min_idx != i:
            arr[i], arr[min_idx] = arr[min_idx], arr[i]
    return arr"""

_JAVA = """\
public static void selectionSort(int[] arr) {
    int n = arr.length;
    for (int i = 0; i < n - 1; i++) {
        int minIdx = i;
        for (int j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIdx]) {
                minIdx = j;
            }
        }
        if (minIdx != i) {
            int temp = arr[i];
            arr[i] = arr[minIdx];
            arr[minIdx] = temp;
        }
    }
}"""

_CPP = """\
void selectionSort(int arr[], int n) {
    for (int i = 0; i < n - 1; i++) {
        int minIdx = i;
        for (int j = i + 1; j < n; j++) {
            if (arr[j] < arr[minIdx]) {
                minIdx = j;
            }
        }
        if (minIdx != i) {
            swap(arr[i], arr[minIdx]);
        }
    }
}"""

LINE_START = 1
LINE_PLACED = 3
LINE_SEARCH = 4
LINE_COMPARE = 6
LINE_NEW_MIN = 7
LINE_SWAP = 9
LINE_DONE = 10


class SelectionSort(SortingAlgorithm):
    KEY = constants.ALGORITHM_SELECTION
    NAME = "Selection Sort"

    SOURCE_TEXTS = {
        constants.LANGUAGE_JAVASCRIPT: _JAVASCRIPT,
        constants.LANGUAGE_PYTHON: _PYTHON,
        constants.LANGUAGE_JAVA: _JAVA,
        constants.LANGUAGE_CPP: _CPP,
    }
    LINE_MAPS = {
        constants.LANGUAGE_JAVASCRIPT: {1: 1, 3: 3, 4: 4, 6: 6, 7: 7, 9: 11, 10: 14},
        constants.LANGUAGE_JAVA: {1: 1, 3: 3, 4: 4, 6: 6, 7: 7, 9: 11, 10: 16},
        constants.LANGUAGE_CPP: {1: 1, 3: 2, 4: 3, 6: 5, 7: 6, 9: 10, 10: 13},
    }

    def sort(self, values: Sequence[Any]) -> Trace:
        rec = TraceRecorder(self.KEY)
        arr = list(values)
        n = len(arr)

        rec.record(arr, "Initial state", LINE_START)

        for i in range(n - 1):
            min_idx = i
            rec.record(
                arr, f"Searching for the minimum (starting at {arr[i]})",
                LINE_SEARCH, current=i,
            )

            for j in range(i + 1, n):
                rec.compare()
                rec.record(
                    arr,
                    f"Comparing {arr[min_idx]} and {arr[j]}",
                    LINE_COMPARE,
                    comparing=(min_idx, j),
                    current=i,
                )
                if arr[j] < arr[min_idx]:
                    min_idx = j
                    rec.record(
                        arr, f"New minimum: {arr[min_idx]}",
                        LINE_NEW_MIN, current=i, pivot=min_idx,
                    )

            if min_idx != i:
                rec.record(
                    arr,
                    f"Swapping {arr[i]} and {arr[min_idx]}",
                    LINE_SWAP,
                    swapping=(i, min_idx),
                )
                rec.swap(arr, i, min_idx)
                rec.record(arr, "Swapped", LINE_SWAP, current=i)

            rec.mark_sorted(range(i + 1))
            rec.record(arr, f"Position {i} holds its final value", LINE_PLACED)

        return rec.finish(arr, "Sorting complete!", LINE_DONE)

    def complexity(self) -> Complexity:
        return Complexity(best="O(n²)", average="O(n²)", worst="O(n²)", space="O(1)")
