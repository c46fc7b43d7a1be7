"""Electron identification classifier binned in pseudorapidity and pt."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import asdict

from .electron_id_inputs import (
    INPUT_NAMES,
    ISOLATION_NAMES,
    N_BINS,
    SUPPORTED_VERSIONS,
    ElectronIDVariables,
    isolation_inputs,
    mva_bin,
    reader_variables,
)
from .mva import InvalidInputError, NotInitializedError, ReaderSpec

__all__ = ["ElectronIDMVA", "Evaluator", "ReaderFactory", "DEFAULT_METHOD_NAME"]

logger = logging.getLogger(__name__)

DEFAULT_METHOD_NAME = "BDTG method"

Evaluator = Callable[[tuple[float, ...]], float]
"""A booked classifier: maps the ordered input values to a response."""

ReaderFactory = Callable[[str, str, ReaderSpec], Evaluator]
"""Books a classifier from ``(method_name, weights_file, spec)``."""


class ElectronIDMVA:
    """Electron identification with one trained classifier per bin.

    The six bins are, in order: barrel, outer barrel and endcap for pt up
    to 20, then the same three regions above it.
    """

    def __init__(self) -> None:
        self._method_name = DEFAULT_METHOD_NAME
        self._version: int | None = None
        self._readers: list[tuple[ReaderSpec, Evaluator]] = []

    @property
    def method_name(self) -> str:
        """Name of the booked classification method."""
        return self._method_name

    @property
    def version(self) -> int | None:
        """Input layout version, or ``None`` before initialisation."""
        return self._version

    def initialize(
        self,
        method_name: str,
        version: int,
        weights_files: Sequence[str],
        reader_factory: ReaderFactory,
    ) -> None:
        """Book one classifier per bin from ``weights_files``.

        ``weights_files`` holds six paths in bin order. ``reader_factory``
        is called once per bin with the method name, the weights file and
        the bin's input layout, and returns the evaluator for that bin.
        """
        if isinstance(version, bool) or version not in SUPPORTED_VERSIONS:
            raise InvalidInputError(f"version must be 1, 2 or 3, got {version!r}")
        files = list(weights_files)
        if len(files) != N_BINS:
            raise InvalidInputError(
                f"expected {N_BINS} weights files, got {len(files)}"
            )

        readers = []
        for bin_index, weights_file in enumerate(files):
            spec = reader_variables(version, bin_index)
            readers.append((spec, reader_factory(method_name, weights_file, spec)))

        self._readers = readers
        self._method_name = method_name
        self._version = int(version)

    def is_initialized(self) -> bool:
        """Return whether classifiers have been booked."""
        return bool(self._readers)

    def mva_value(
        self,
        variables: ElectronIDVariables,
        rho: float = 0.0,
        print_debug: bool = False,
    ) -> float:
        """Return the classifier response for one electron.

        ``rho`` is the event energy density used to correct the isolation
        inputs; it only matters for layouts that take isolation.
        """
        if not self.is_initialized():
            raise NotInitializedError("ElectronIDMVA not properly initialized")

        bin_index = mva_bin(variables.eta, variables.pt)
        spec, evaluator = self._readers[bin_index]

        fields = asdict(variables)
        values = {name: fields[attr] for name, attr in INPUT_NAMES.items()}
        if any(name in spec.variables for name in ISOLATION_NAMES):
            values.update(isolation_inputs(variables, rho))

        inputs = spec.inputs(values)
        mva = float(evaluator(inputs))

        if print_debug:
            logger.debug(
                "%s %s --> MVABin %d : %s === : === %s",
                variables.pt,
                variables.eta,
                bin_index,
                " ".join(f"{name}={value}" for name, value in zip(spec.variables, inputs)),
                mva,
            )
        return mva