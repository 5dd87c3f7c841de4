"""Schema keyword rules and the pipeline that composes them."""

from loom_rules.base import SchemaRule
from loom_rules.batch import BatchGenerator, BatchResult
from loom_rules.factory import RuleFactory
from loom_rules.pipeline import RulePipeline
from loom_rules.properties import PropertiesRule
from loom_rules.required_array import REQUIRED_COMMENT_TEXT, RequiredArrayRule

__all__ = [
    "REQUIRED_COMMENT_TEXT",
    "BatchGenerator",
    "BatchResult",
    "PropertiesRule",
    "RequiredArrayRule",
    "RuleFactory",
    "RulePipeline",
    "SchemaRule",
]
