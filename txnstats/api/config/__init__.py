"""Configuration for txnstats runs."""

from .ConfigError import ConfigError
from .get_home_dir import get_home_dir
from .load_config import load_config
from .ScanConfig import ScanConfig
from .StatsConfig import StatsConfig

__all__ = ["ConfigError", "ScanConfig", "StatsConfig", "get_home_dir", "load_config"]
