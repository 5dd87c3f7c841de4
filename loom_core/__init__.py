# schemaloom core package

from loom_core.config import GenerationConfig
from loom_core.errors import InvalidConfigError, MalformedSchemaError, SchemaloomError
from loom_core.naming import NameHelper

__all__ = [
    "GenerationConfig",
    "NameHelper",
    "SchemaloomError",
    "MalformedSchemaError",
    "InvalidConfigError",
]
