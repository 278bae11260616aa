"""What a txnstats command hands back to the CLI."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Announce, progress, result and output of one command run.

    ``progress_callback`` does the work: it yields ``(fraction, message)``
    pairs and fills in ``result``, ``output`` and ``success`` before it
    finishes. ``output`` must validate against the command's registered
    schema; for ``cmd_report`` it carries the serialized report, or ``None``
    in its place when the run failed.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""  # one-line summary shown on stderr
    output: dict = field(default_factory=dict)
    success: bool = False
