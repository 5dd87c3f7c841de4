"""
Batch Class Generation
======================

Generates classes for many schemas using a ThreadPoolExecutor.
Each worker owns the class it builds; rules and their collaborators are
shared read-only. A failing schema does not stop the others.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock
from typing import Optional

from loom_core.errors import SchemaloomError
from loom_core.models.types import GeneratedClass
from loom_core.schema import load_schema

from loom_rules.factory import RuleFactory

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    """Classes keyed by schema path, plus per-schema error messages."""

    classes: dict[str, GeneratedClass] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return not self.errors


class BatchGenerator:
    """Runs the rule pipeline over many schema files in parallel."""

    def __init__(self, factory: RuleFactory, max_workers: Optional[int] = None) -> None:
        self.factory = factory
        self.max_workers = max_workers or factory.config.max_workers
        self.stats: dict[str, int] = {
            "total": 0,
            "success": 0,
            "failed": 0,
        }
        self._stats_lock = Lock()

    def generate(self, paths: list[str | Path], package: Optional[str] = None) -> BatchResult:
        """Generate one class per schema file.

        Args:
            paths: Schema files to load
            package: Package override for every generated class

        Returns:
            BatchResult with classes and errors keyed by the given path
        """
        self.reset_stats()
        result = BatchResult()
        if not paths:
            return result

        with self._stats_lock:
            self.stats["total"] = len(paths)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self._generate_single, str(path), package): str(path)
                for path in paths
            }
            for future in as_completed(futures):
                path = futures[future]
                try:
                    result.classes[path] = future.result()
                except SchemaloomError as e:
                    logger.error(f"Failed to generate {path}: {e}")
                    result.errors[path] = str(e)
                    self._increment_failed()

        with self._stats_lock:
            self.stats["success"] = self.stats["total"] - self.stats["failed"]
        logger.info(
            f"Generation complete: {self.stats['success']} succeeded, "
            f"{self.stats['failed']} failed"
        )

        # as_completed order is arbitrary; report in input order
        ordered = BatchResult()
        for path in map(str, paths):
            if path in result.classes:
                ordered.classes[path] = result.classes[path]
            if path in result.errors:
                ordered.errors[path] = result.errors[path]
        return ordered

    def _generate_single(self, path: str, package: Optional[str]) -> GeneratedClass:
        schema = load_schema(path)
        return self.factory.generate_class(schema, package=package)

    def get_stats(self) -> dict[str, int]:
        """Get a copy of the counters from the last generate() call."""
        with self._stats_lock:
            return self.stats.copy()

    def reset_stats(self) -> None:
        """Reset statistics counters."""
        with self._stats_lock:
            self.stats = {"total": 0, "success": 0, "failed": 0}

    def _increment_failed(self) -> None:
        """Thread-safe increment of failed counter."""
        with self._stats_lock:
            self.stats["failed"] += 1
