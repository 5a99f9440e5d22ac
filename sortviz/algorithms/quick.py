"""Quick sort with Lomuto partitioning around the last element."""

from __future__ import annotations

from typing import Any, Sequence

from ..algorithm import Complexity, SortingAlgorithm
from ..recorder import TraceRecorder
from ..trace_types import Trace
from .. import constants

_JAVASCRIPT = """\
function quickSort(arr, low = 0, high = arr.length - 1) {
    if (low < high) {
        const pi = partition(arr, low, high);
        quickSort(arr, low, pi - 1);
        quickSort(arr, pi + 1, high);
    }
    return arr;
}

function partition(arr, low, high) {
    const pivot = arr[high];
    let i = low - 1;

    for (let j = low; j < high; j++) {
        if (arr[j] < pivot) {
            i++;
            [arr[i], arr[j]] = [arr[j], arr[i]];
        }
    }
    [arr[i + 1], arr[high]] = [arr[high], arr[i + 1]];
    return i + 1;
}"""

_PYTHON = """\
def quick_sort(arr, low=0, high=None):
    if high is None:
        high = len(arr) - 1
    if low < high:
        pi = partition(arr, low, high)
        quick_sort(arr, low, pi - 1)
        quick_sort(arr, pi + 1, high)
    return arr

def partition(arr, low, high):
    pivot = arr[high]
    i = low - 1

    for j in range(low, high):
        if arr[j] < pivot:
            i += 1
            arr[i], arr[j] = arr[j], arr[i]

    arr[i + 1], arr[high] = arr[high], arr[i + 1]
    return i + 1"""

_JAVA = """\
public static void quickSort(int[] arr, int low, int high) {
    if (low < high) {
        int pi = partition(arr, low, high);
        quickSort(arr, low, pi - 1);
        quickSort(arr, pi + 1, high);
    }
}

private static int partition(int[] arr, int low, int high) {
    int pivot = arr[high];
    int i = low - 1;

    for (int j = low; j < high; j++) {
        if (arr[j] < pivot) {
            i++;
            int temp = arr[i];
            arr[i] = arr[j];
            arr[j] = temp;
        }
    }
    int temp = arr[i + 1];
    arr[i + 1] = arr[high];
    arr[high] = temp;
    return i + 1;
}"""

_CPP = """\
int partition(int arr[], int low, int high) {
    int pivot = arr[high];
    int i = low - 1;

    for (int j = low; j < high; j++) {
        if (arr[j] < pivot) {
            i++;
            swap(arr[i], arr[j]);
        }
    }
    swap(arr[i + 1], arr[high]);
    return i + 1;
}

void quickSort(int arr[], int low, int high) {
    if (low < high) {
        int pi = partition(arr, low, high);
        quickSort(arr, low, pi - 1);
        quickSort(arr, pi + 1, high);
    }
}"""

LINE_START = 1
LINE_DONE = 8
LINE_PIVOT = 11
LINE_COMPARE = 15
LINE_SWAP = 17
LINE_PLACE_PIVOT = 19


class QuickSort(SortingAlgorithm):
    """Quick sort.

    Partitions are never marked sorted mid-run; only the terminal step
    carries a sorted region.
    """

    KEY = constants.ALGORITHM_QUICK
    NAME = "Quick Sort"

    SOURCE_TEXTS = {
        constants.LANGUAGE_JAVASCRIPT: _JAVASCRIPT,
        constants.LANGUAGE_PYTHON: _PYTHON,
        constants.LANGUAGE_JAVA: _JAVA,
        constants.LANGUAGE_CPP: _CPP,
    }
    LINE_MAPS = {
        constants.LANGUAGE_JAVASCRIPT: {1: 1, 8: 7, 11: 11, 15: 15, 17: 17, 19: 20},
        constants.LANGUAGE_JAVA: {1: 1, 8: 7, 11: 10, 15: 14, 17: 16, 19: 21},
        constants.LANGUAGE_CPP: {1: 15, 8: 21, 11: 2, 15: 6, 17: 8, 19: 11},
    }

    def sort(self, values: Sequence[Any]) -> Trace:
        rec = TraceRecorder(self.KEY)
        arr = list(values)

        rec.record(arr, "Initial state", LINE_START)
        self._quick_sort(arr, 0, len(arr) - 1, rec)
        return rec.finish(arr, "Sorting complete!", LINE_DONE)

    def _quick_sort(self, arr: list[Any], low: int, high: int, rec: TraceRecorder):
        if low < high:
            pi = self._partition(arr, low, high, rec)
            self._quick_sort(arr, low, pi - 1, rec)
            self._quick_sort(arr, pi + 1, high, rec)

    def _partition(self, arr: list[Any], low: int, high: int, rec: TraceRecorder) -> int:
        pivot = arr[high]
        rec.record(
            arr, f"Pivot: {pivot}", LINE_PIVOT, pivot=high, span=(low, high)
        )

        i = low - 1
        for j in range(low, high):
            rec.compare()
            rec.record(
                arr,
                f"Comparing {arr[j]} with pivot {pivot}",
                LINE_COMPARE,
                comparing=(j, high),
                pivot=high,
                span=(low, high),
            )
            if arr[j] < pivot:
                i += 1
                if i != j:
                    rec.record(
                        arr,
                        f"Swapping {arr[i]} and {arr[j]}",
                        LINE_SWAP,
                        swapping=(i, j),
                        pivot=high,
                        span=(low, high),
                    )
                    rec.swap(arr, i, j)
                    rec.record(
                        arr, "Swapped", LINE_SWAP, current=i, pivot=high, span=(low, high)
                    )

        rec.record(
            arr,
            f"Moving pivot {pivot} into position {i + 1}",
            LINE_PLACE_PIVOT,
            swapping=(i + 1, high),
            span=(low, high),
        )
        rec.swap(arr, i + 1, high)
        rec.record(
            arr, f"Pivot {pivot} placed", LINE_PLACE_PIVOT, current=i + 1, span=(low, high)
        )
        return i + 1

    def complexity(self) -> Complexity:
        return Complexity(
            best="O(n log n)", average="O(n log n)", worst="O(n²)", space="O(log n)"
        )
