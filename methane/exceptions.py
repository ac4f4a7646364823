"""Errors and warnings raised by the pipeline."""


class MissingColumnError(KeyError):
    """A required input column is absent after column-name normalisation."""

    def __init__(self, missing, available=None):
        self.missing = list(missing)
        self.available = list(available) if available is not None else []
        message = f"Missing expected columns: {self.missing}"
        if self.available:
            message += f" (available: {self.available})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class UnmatchedCountryWarning(UserWarning):
    """An emissions country has no population row after alias reconciliation."""


class DuplicateAggregateWarning(UserWarning):
    """A (country, sector) key occurs more than once where one row is expected."""
