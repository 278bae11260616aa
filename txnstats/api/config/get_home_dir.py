"""Get txnstats home directory path or path under it."""

import os
from pathlib import Path

from ...constants import TXNSTATS_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get txnstats home directory path or path under it.

    Checks TXNSTATS_HOME environment variable first, defaults to ~/.txnstats.

    Examples:
        >>> get_home_dir()
        Path("/home/user/.txnstats")
        >>> get_home_dir("config.json")
        Path("/home/user/.txnstats/config.json")
    """
    home_env = os.environ.get("TXNSTATS_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        home = Path.home() / TXNSTATS_HOME_EXT

    return home / Path(*parts) if parts else home
