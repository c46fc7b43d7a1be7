"""The e/gamma electron classifier, optionally binned in eta and pt."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import asdict

from .egamma_variables import (
    BIN_COUNTS,
    INPUT_NAMES,
    ElectronMVAVariables,
    MVAType,
    bind_variables,
    mva_bin_for,
    reader_layout,
)
from .electron_id_mva import DEFAULT_METHOD_NAME, Evaluator, ReaderFactory
from .mva import InvalidInputError, NotInitializedError, ReaderSpec

__all__ = ["EGammaMvaEleEstimator"]

logger = logging.getLogger(__name__)


class EGammaMvaEleEstimator:
    """Evaluates a trained e/gamma classifier for single electrons.

    In the binned version one classifier is booked per bin of
    :func:`~hwwval.egamma_variables.mva_bin_for`; otherwise a single
    classifier serves every electron.
    """

    def __init__(self) -> None:
        self._method_name = DEFAULT_METHOD_NAME
        self._mva_type = MVAType.TRIG
        self._use_binned_version = True
        self._readers: list[tuple[ReaderSpec, Evaluator]] = []

    @property
    def method_name(self) -> str:
        """Name of the booked classification method."""
        return self._method_name

    @property
    def mva_type(self) -> MVAType:
        """Flavour of the booked classifier."""
        return self._mva_type

    @property
    def use_binned_version(self) -> bool:
        """Whether one classifier per bin is used."""
        return self._use_binned_version

    @property
    def n_bins(self) -> int:
        """Number of booked classifiers."""
        return len(self._readers)

    def initialize(
        self,
        method_name: str,
        mva_type: MVAType,
        use_binned_version: bool,
        weights_files: Sequence[str],
        reader_factory: ReaderFactory,
    ) -> None:
        """Book the classifiers from ``weights_files``.

        The binned version needs one weights file per bin of ``mva_type``,
        the unbinned one exactly one. ``reader_factory`` is called for each
        with the method name, the weights file and the input layout.
        """
        mva_type = MVAType(mva_type)
        use_binned_version = bool(use_binned_version)
        if isinstance(weights_files, str):
            files = [weights_files]
        else:
            files = list(weights_files)
        expected = BIN_COUNTS[mva_type] if use_binned_version else 1
        if len(files) != expected:
            raise InvalidInputError(
                f"expected number of bins = {expected} does not equal "
                f"number of weights files = {len(files)}"
            )

        readers = []
        for bin_index, weights_file in enumerate(files):
            spec = reader_layout(mva_type, bin_index, use_binned_version)
            readers.append((spec, reader_factory(method_name, weights_file, spec)))

        self._readers = readers
        self._method_name = method_name
        self._mva_type = mva_type
        self._use_binned_version = use_binned_version

    def is_initialized(self) -> bool:
        """Return whether classifiers have been booked."""
        return bool(self._readers)

    def mva_bin(self, eta: float, pt: float) -> int:
        """Return the bin of the configured classifier for ``eta`` and ``pt``."""
        return mva_bin_for(self._mva_type, eta, pt)

    def mva_value(self, variables: ElectronMVAVariables, print_debug: bool = False) -> float:
        """Return the classifier response for one electron.

        Inputs that tend to diverge are clipped before evaluation.
        """
        if not self.is_initialized():
            raise NotInitializedError("EGammaMvaEleEstimator not properly initialized")

        bound = bind_variables(variables)
        bin_index = self.mva_bin(bound.eta, bound.pt)
        spec, evaluator = self._readers[bin_index if self._use_binned_version else 0]

        fields = asdict(bound)
        values = {name: float(fields[attr]) for name, attr in INPUT_NAMES.items()}
        inputs = spec.inputs(values)
        mva = float(evaluator(inputs))

        if print_debug:
            logger.debug(
                "bin %d %s ### MVA %s",
                bin_index,
                " ".join(f"{name} {value}" for name, value in zip(spec.variables, inputs)),
                mva,
            )
        return mva