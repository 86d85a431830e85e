"""Domain errors raised by the persistence layer."""


class TaskValidationError(ValueError):
    """A document failed schema validation and was not written.

    Attributes:
        model: Name of the document model (e.g. "Task")
        errors: Mapping of field path -> human readable reason
    """

    def __init__(self, model: str, errors: dict[str, str]):
        self.model = model
        self.errors = dict(errors)
        details = ", ".join(f"{path}: {reason}" for path, reason in self.errors.items())
        super().__init__(f"{model} validation failed: {details}")


def required_field_message(path: str) -> str:
    """Message used when a required field is missing or empty."""
    return f"Path `{path}` is required."
