"""Step-recording sorting visualizer core."""

from .api import (  # noqa: F401
    record_trace,
    dump_trace,
    describe_algorithm,
    compare_algorithms,
    play_trace,
    replay_instantly,
)
from .algorithms import get_algorithm, SUPPORTED_ALGORITHMS  # noqa: F401
from .playback import PlaybackEngine  # noqa: F401
from .run_types import PlaybackConfig, PlaybackState, SortStats  # noqa: F401
from .trace_types import Highlight, Step, Trace  # noqa: F401
