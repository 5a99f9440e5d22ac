"""Bubble sort with an early-exit pass."""

from __future__ import annotations

from typing import Any, Sequence

from ..algorithm import Complexity, SortingAlgorithm
from ..recorder import TraceRecorder
from ..trace_types import Trace
from .. import constants

_JAVASCRIPT = """\
function bubbleSort(arr) {
    const n = arr.length;
    for (let i = 0; i < n - 1; i++) {
        let swapped = false;
        for (let j = 0; j < n - i - 1; j++) {
            if (arr[j] > arr[j + 1]) {
                [arr[j], arr[j + 1]] = [arr[j + 1], arr[j]];
                swapped = true;
            }
        }
        if (!swapped) break;
    }
    return arr;
}"""

_PYTHON = """\
def bubble_sort(arr):
    n = len(arr)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break
    return arr"""

_JAVA = """\
public static void bubbleSort(int[] arr) {
    int n = arr.length;
    for (int i = 0; i < n - 1; i++) {
        boolean swapped = false;
        for (int j = 0; j < n - i - 1; j++) {
            if (arr[j] > arr[j + 1]) {
                int temp = arr[j];
                arr[j] = arr[j + 1];
                arr[j + 1] = temp;
                swapped = true;
            }
        }
        if (!swapped) break;
    }
}"""

_CPP = """\
void bubbleSort(int arr[], int n) {
    for (int i = 0; i < n - 1; i++) {
        bool swapped = false;
        for (int j = 0; j < n - i - 1; j++) {
            if (arr[j] > arr[j + 1]) {
                swap(arr[j], arr[j + 1]);
                swapped = true;
            }
        }
        if (!swapped) break;
    }
}"""

# Python listing lines referenced by recorded steps
LINE_START = 1
LINE_COMPARE = 6
LINE_SWAP = 7
LINE_SWAPPED = 8
LINE_PASS_DONE = 9
LINE_DONE = 11


class BubbleSort(SortingAlgorithm):
    """Adjacent-exchange sort; each pass bubbles the largest value to the end."""

    KEY = constants.ALGORITHM_BUBBLE
    NAME = "Bubble Sort"

    SOURCE_TEXTS = {
        constants.LANGUAGE_JAVASCRIPT: _JAVASCRIPT,
        constants.LANGUAGE_PYTHON: _PYTHON,
        constants.LANGUAGE_JAVA: _JAVA,
        constants.LANGUAGE_CPP: _CPP,
    }
    LINE_MAPS = {
        constants.LANGUAGE_JAVASCRIPT: {1: 1, 6: 6, 7: 7, 8: 8, 9: 11, 11: 13},
        constants.LANGUAGE_JAVA: {1: 1, 6: 6, 7: 7, 8: 10, 9: 13, 11: 15},
        constants.LANGUAGE_CPP: {1: 1, 6: 5, 7: 6, 8: 7, 9: 10, 11: 12},
    }

    def sort(self, values: Sequence[Any]) -> Trace:
        rec = TraceRecorder(self.KEY)
        arr = list(values)
        n = len(arr)

        rec.record(arr, "Initial state", LINE_START)

        for i in range(n - 1):
            swapped = False
            for j in range(n - i - 1):
                rec.compare()
                rec.record(
                    arr,
                    f"Comparing {arr[j]} and {arr[j + 1]}",
                    LINE_COMPARE,
                    comparing=(j, j + 1),
                )
                if arr[j] > arr[j + 1]:
                    rec.record(
                        arr,
                        f"{arr[j]} > {arr[j + 1]}, swapping",
                        LINE_SWAP,
                        swapping=(j, j + 1),
                    )
                    rec.swap(arr, j, j + 1)
                    rec.record(arr, "Swapped", LINE_SWAPPED, current=j + 1)
                    swapped = True

            rec.mark_sorted(range(n - 1 - i, n))
            rec.record(arr, f"Pass {i + 1} complete", LINE_PASS_DONE)

            if not swapped:
                break

        return rec.finish(arr, "Sorting complete!", LINE_DONE)

    def complexity(self) -> Complexity:
        return Complexity(best="O(n)", average="O(n²)", worst="O(n²)", space="O(1)")
