"""Config API module."""

from .get_home_dir import get_home_dir
from .get_package_version import get_package_version
from .ScanConfig import ScanConfig

__all__ = ["ScanConfig", "get_home_dir", "get_package_version"]
