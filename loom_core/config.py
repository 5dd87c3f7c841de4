"""
schemaloom Generation Configuration
===================================

Read-only toggles consumed by the generation rules.

Environment Variables:
    SCHEMALOOM_INCLUDE_JSR303_ANNOTATIONS: emit @NotNull on required fields (default: false)
    SCHEMALOOM_USE_JAKARTA_VALIDATION: use jakarta.validation instead of javax.validation
    SCHEMALOOM_INCLUDE_SWAGGER2_ANNOTATIONS: emit @ApiModelProperty metadata (default: false)
    SCHEMALOOM_USE_PRIMITIVES: map integer/number/boolean to primitives (default: false)
    SCHEMALOOM_USE_LONG_INTEGERS: map integer to Long (default: false)
    SCHEMALOOM_GENERATE_BUILDERS: add withX builder methods (default: false)
    SCHEMALOOM_PROPERTY_WORD_DELIMITERS: characters splitting property words (default: "- _")
    SCHEMALOOM_TARGET_PACKAGE: package for generated classes (default: "")
    SCHEMALOOM_MAX_WORKERS: worker threads for batch generation (default: 4)
"""

import os
from dataclasses import dataclass

DEFAULT_PROPERTY_WORD_DELIMITERS = "- _"
DEFAULT_MAX_WORKERS = 4

JAVAX_NOT_NULL = "javax.validation.constraints.NotNull"
JAKARTA_NOT_NULL = "jakarta.validation.constraints.NotNull"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration shared by all rules of one generation run.

    Attributes:
        include_nullability_annotations: Add a not-null annotation to required fields
        use_jakarta_validation: Use the jakarta namespace for validation annotations
        include_swagger2_annotations: Record property metadata in @ApiModelProperty
        use_primitives: Prefer int/double/boolean over their wrapper types
        use_long_integers: Map "integer" to Long instead of Integer
        generate_builders: Add fluent withX methods next to setters
        property_word_delimiters: Characters that separate words in property names
        target_package: Package assigned to generated classes
        max_workers: Worker threads used by batch generation
    """

    include_nullability_annotations: bool = False
    use_jakarta_validation: bool = False
    include_swagger2_annotations: bool = False
    use_primitives: bool = False
    use_long_integers: bool = False
    generate_builders: bool = False
    property_word_delimiters: str = DEFAULT_PROPERTY_WORD_DELIMITERS
    target_package: str = ""
    max_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls, **overrides) -> "GenerationConfig":
        """Create configuration from environment variables.

        Keyword overrides take precedence over the environment.

        Returns:
            GenerationConfig instance with values from environment
        """
        values = {
            "include_nullability_annotations": _env_flag("SCHEMALOOM_INCLUDE_JSR303_ANNOTATIONS"),
            "use_jakarta_validation": _env_flag("SCHEMALOOM_USE_JAKARTA_VALIDATION"),
            "include_swagger2_annotations": _env_flag("SCHEMALOOM_INCLUDE_SWAGGER2_ANNOTATIONS"),
            "use_primitives": _env_flag("SCHEMALOOM_USE_PRIMITIVES"),
            "use_long_integers": _env_flag("SCHEMALOOM_USE_LONG_INTEGERS"),
            "generate_builders": _env_flag("SCHEMALOOM_GENERATE_BUILDERS"),
            "property_word_delimiters": os.environ.get(
                "SCHEMALOOM_PROPERTY_WORD_DELIMITERS", DEFAULT_PROPERTY_WORD_DELIMITERS
            ),
            "target_package": os.environ.get("SCHEMALOOM_TARGET_PACKAGE", ""),
        }

        workers = os.environ.get("SCHEMALOOM_MAX_WORKERS")
        try:
            values["max_workers"] = int(workers) if workers else DEFAULT_MAX_WORKERS
        except ValueError:
            # Left invalid so get_validation_errors() reports it
            values["max_workers"] = 0

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def not_null_annotation(self) -> str:
        """Fully qualified name of the not-null annotation to emit."""
        return JAKARTA_NOT_NULL if self.use_jakarta_validation else JAVAX_NOT_NULL

    def is_valid(self) -> bool:
        """Check if configuration can be used for generation."""
        return not self.get_validation_errors()

    def get_validation_errors(self) -> list[str]:
        """Get list of validation errors.

        Returns:
            List of validation error messages
        """
        errors = []

        if self.max_workers < 1:
            errors.append("SCHEMALOOM_MAX_WORKERS must be a positive integer")
        if not self.property_word_delimiters:
            errors.append("SCHEMALOOM_PROPERTY_WORD_DELIMITERS must not be empty")

        return errors
