"""Common pieces shared by the multivariate electron classifiers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

__all__ = [
    "MVAError",
    "NotInitializedError",
    "InvalidInputError",
    "ReaderSpec",
]


class MVAError(Exception):
    """Base class for errors raised by the classifiers."""


class NotInitializedError(MVAError):
    """A classifier was evaluated before being initialised."""


class InvalidInputError(MVAError):
    """A classifier was configured or fed with inconsistent input."""


@dataclass
class ReaderSpec:
    """Ordered input layout of one trained classifier.

    Variables are fed to the classifier in the order they were added;
    spectators are carried along but take no part in the evaluation.
    """

    variables: list[str] = field(default_factory=list)
    spectators: list[str] = field(default_factory=list)

    def _check_new(self, name: str) -> None:
        if not name:
            raise InvalidInputError("input name must not be empty")
        if name in self.variables or name in self.spectators:
            raise InvalidInputError(f"input {name!r} is already declared")

    def add_variable(self, name: str) -> ReaderSpec:
        """Append a training variable; returns the spec for chaining."""
        self._check_new(name)
        self.variables.append(name)
        return self

    def add_spectator(self, name: str) -> ReaderSpec:
        """Append a spectator; returns the spec for chaining."""
        self._check_new(name)
        self.spectators.append(name)
        return self

    def inputs(self, values: Mapping[str, float]) -> tuple[float, ...]:
        """Return the variable values from ``values`` in declaration order."""
        missing = [name for name in self.variables if name not in values]
        if missing:
            raise InvalidInputError(f"missing values for: {', '.join(missing)}")
        return tuple(float(values[name]) for name in self.variables)