"""Services package for the yo CLI core."""

from .config_store import ConfigStore
from .error_mapper import ErrorMapping, map_exception
from .generator_catalog import GeneratorCatalog, GeneratorRecord
from .package_reader import DescriptorLookupError, PackageLookup, read_package_up
from .update_notifier import UpdateInfo, UpdateNotifier

__all__ = [
    "ConfigStore",
    "ErrorMapping",
    "map_exception",
    "GeneratorCatalog",
    "GeneratorRecord",
    "DescriptorLookupError",
    "PackageLookup",
    "read_package_up",
    "UpdateInfo",
    "UpdateNotifier",
]
