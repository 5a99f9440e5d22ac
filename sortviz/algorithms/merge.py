"""Top-down merge sort with a stable linear merge."""

from __future__ import annotations

from typing import Any, Sequence

from ..algorithm import Complexity, SortingAlgorithm
from ..recorder import TraceRecorder
from ..trace_types import Trace
from .. import constants

_JAVASCRIPT = """\
function mergeSort(arr, left = 0, right = arr.length - 1) {
    if (left < right) {
        const mid = Math.floor((left + right) / 2);
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
    return arr;
}

function merge(arr, left, mid, right) {
    const leftArr = arr.slice(left, mid + 1);
    const rightArr = arr.slice(mid + 1, right + 1);
    let i = 0, j = 0, k = left;

    while (i < leftArr.length && j < rightArr.length) {
        arr[k++] = leftArr[i] <= rightArr[j] ? leftArr[i++] : rightArr[j++];
    }
    while (i < leftArr.length) arr[k++] = leftArr[i++];
    while (j < rightArr.length) arr[k++] = rightArr[j++];
}"""

_PYTHON = """\
def merge_sort(arr, left=0, right=None):
    if right is None:
        right = len(arr) - 1
    if left < right:
        mid = (left + right) // 2
        merge_sort(arr, left, mid)
        merge_sort(arr, mid + 1, right)
        merge(arr, left, mid, right)
    return arr

def merge(arr, left, mid, right):
    left_arr = arr[left:mid + 1]
    right_arr = arr[mid + 1:right + 1]
    i = j = 0
    k = left

    while i < len(left_arr) and j < len(right_arr):
        if left_arr[i] <= right_arr[j]:
            arr[k] = left_arr[i]
            i += 1
        else:
            arr[k] = right_arr[j]
            j += 1
        k += 1

    while i < len(left_arr):
        arr[k] = left_arr[i]
        i += 1
        k += 1
    while j < len(right_arr):
        arr[k] = right_arr[j]
        j += 1
        k += 1"""

_JAVA = """\
public static void mergeSort(int[] arr, int left, int right) {
    if (left < right) {
        int mid = (left + right) / 2;
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
}

private static void merge(int[] arr, int left, int mid, int right) {
    int n1 = mid - left + 1;
    int n2 = right - mid;
    int[] leftArr = new int[n1];
    int[] rightArr = new int[n2];

    System.arraycopy(arr, left, leftArr, 0, n1);
    System.arraycopy(arr, mid + 1, rightArr, 0, n2);

    int i = 0, j = 0, k = left;
    while (i < n1 && j < n2) {
        arr[k++] = leftArr[i] <= rightArr[j] ? leftArr[i++] : rightArr[j++];
    }
    while (i < n1) arr[k++] = leftArr[i++];
    while (j < n2) arr[k++] = rightArr[j++];
}"""

_CPP = """\
void merge(int arr[], int left, int mid, int right) {
    int n1 = mid - left + 1;
    int n2 = right - mid;
    int leftArr[n1], rightArr[n2];

    for (int i = 0; i < n1; i++)
        leftArr[i] = arr[left + i];
    for (int j = 0; j < n2; j++)
        rightArr[j] = arr[mid + 1 + j];

    int i = 0, j = 0, k = left;
    while (i < n1 && j < n2) {
        arr[k++] = leftArr[i] <= rightArr[j] ? leftArr[i++] : rightArr[j++];
    }
    while (i < n1) arr[k++] = leftArr[i++];
    while (j < n2) arr[k++] = rightArr[j++];
}

void mergeSort(int arr[], int left, int right) {
    if (left < right) {
        int mid = left + (right - left) / 2;
        mergeSort(arr, left, mid);
        mergeSort(arr, mid + 1, right);
        merge(arr, left, mid, right);
    }
}"""

LINE_START = 1
LINE_SPLIT = 5
LINE_MERGED = 8
LINE_DONE = 9
LINE_COMPARE = 18


class MergeSort(SortingAlgorithm):
    KEY = constants.ALGORITHM_MERGE
    NAME = "Merge Sort"

    SOURCE_TEXTS = {
        constants.LANGUAGE_JAVASCRIPT: _JAVASCRIPT,
        constants.LANGUAGE_PYTHON: _PYTHON,
        constants.LANGUAGE_JAVA: _JAVA,
        constants.LANGUAGE_CPP: _CPP,
    }
    LINE_MAPS = {
        constants.LANGUAGE_JAVASCRIPT: {1: 1, 5: 3, 8: 6, 9: 8, 18: 17},
        constants.LANGUAGE_JAVA: {1: 1, 5: 3, 8: 6, 9: 8, 18: 21},
        constants.LANGUAGE_CPP: {1: 19, 5: 21, 8: 24, 9: 26, 18: 13},
    }

    def sort(self, values: Sequence[Any]) -> Trace:
        rec = TraceRecorder(self.KEY)
        arr = list(values)

        rec.record(arr, "Initial state", LINE_START)
        self._merge_sort(arr, 0, len(arr) - 1, rec)
        return rec.finish(arr, "Sorting complete!", LINE_DONE)

    def _merge_sort(self, arr: list[Any], left: int, right: int, rec: TraceRecorder):
        if left >= right:
            return
        mid = (left + right) // 2
        rec.record(
            arr,
            f"Splitting [{left}..{mid}] and [{mid + 1}..{right}]",
            LINE_SPLIT,
            span=(left, right),
            current=mid,
        )
        self._merge_sort(arr, left, mid, rec)
        self._merge_sort(arr, mid + 1, right, rec)
        self._merge(arr, left, mid, right, rec)

    def _merge(
        self, arr: list[Any], left: int, mid: int, right: int, rec: TraceRecorder
    ):
        left_arr = arr[left : mid + 1]
        right_arr = arr[mid + 1 : right + 1]
        i = j = 0
        k = left

        while i < len(left_arr) and j < len(right_arr):
            rec.compare()
            rec.record(
                arr,
                f"Merging: {left_arr[i]} and {right_arr[j]}",
                LINE_COMPARE,
                comparing=(left + i, mid + 1 + j),
                span=(left, right),
            )
            # <= keeps equal elements in their original order
            if left_arr[i] <= right_arr[j]:
                arr[k] = left_arr[i]
                i += 1
            else:
                arr[k] = right_arr[j]
                j += 1
            k += 1

        arr[k : right + 1] = left_arr[i:] + right_arr[j:]

        rec.mark_sorted(range(left, right + 1))
        rec.record(arr, f"Merged [{left}..{right}]", LINE_MERGED, span=(left, right))

    def complexity(self) -> Complexity:
        return Complexity(
            best="O(n log n)", average="O(n log n)", worst="O(n log n)", space="O(n)"
        )
