"""External ``go doc`` invocation."""

from __future__ import annotations

import subprocess
import sys
from typing import Sequence

GO_EXECUTABLE = "go"


def run_go_doc(arguments: Sequence[str]) -> int:
    """Run ``go doc`` with inherited standard streams.

    Args:
        arguments: Package and symbol arguments for ``go doc``.

    Returns:
        Exit code of ``go doc``, or 1 when the go tool cannot start.
    """
    command = [GO_EXECUTABLE, "doc", *arguments]
    try:
        completed = subprocess.run(command, check=False)
    except OSError as error:
        print(f"Failed to run {' '.join(command)}: {error}", file=sys.stderr)
        return 1
    return completed.returncode
