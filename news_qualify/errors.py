"""Exceptions that abort a qualification run."""


class QualificationError(Exception):
    """Base class for fatal pipeline errors."""


class MissingInputError(QualificationError, FileNotFoundError):
    """The input record collection does not exist."""


class SchemaViolationError(QualificationError, ValueError):
    """A required field is absent or holds a value that cannot be coerced."""


class ClassificationUnavailableError(QualificationError, RuntimeError):
    """The language identifier could not be used for this run."""
