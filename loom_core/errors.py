"""Exception types raised at the edges of the generator."""


class SchemaloomError(Exception):
    """Base class for schemaloom errors."""

    pass


class MalformedSchemaError(SchemaloomError):
    """Raised when a schema node does not have the shape a rule expects."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message)


class InvalidConfigError(SchemaloomError):
    """Raised when generation configuration fails validation."""

    pass
