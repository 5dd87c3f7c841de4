"""Swagger 2 ``@ApiModelProperty`` applier."""

from __future__ import annotations

import logging

from loom_core.models.types import GeneratedField

from loom_rules.annotators.base import AnnotationApplier

logger = logging.getLogger(__name__)

API_MODEL_PROPERTY = "io.swagger.annotations.ApiModelProperty"


class Swagger2AnnotationApplier(AnnotationApplier):
    """Writes property metadata into a single ``@ApiModelProperty`` per field.

    The annotation is shared: a description recorded by the properties rule
    and the required flag recorded later end up in the same annotation.
    """

    def describe_property(self, field: GeneratedField, description: str) -> None:
        if not description:
            return
        field.annotate(API_MODEL_PROPERTY).param("value", description)

    def mark_required(self, field: GeneratedField, required: bool) -> None:
        field.annotate(API_MODEL_PROPERTY).param("required", required)
        logger.debug(f"ApiModelProperty(required={required}) on field {field.name}")
