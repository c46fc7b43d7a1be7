# hwwval

Building blocks for lepton selection in H→WW validation studies. The package
has no runtime dependencies.

## Modules

- `hwwval.muon_effective_area`: `muon_effective_area(area_type, sc_eta, target)`
  returns pile-up effective areas for muon isolation sums, per
  `MuonEffectiveAreaType` and `MuonEffectiveAreaTarget` (`NO_CORR`,
  `DATA_2011`, `SUMMER11_MC`, `FALL11_MC`, `DATA_2012`). The default target is
  `DATA_2011`. When a type has no table for the chosen target, the result is zero.
- `hwwval.electron_effective_area`: `electron_effective_area(area_type, eta)`
  for each `ElectronEffectiveAreaType`. The result is zero outside `|eta| < 2.5`.
- `hwwval.mva`: the `ReaderSpec` input layout, with `add_variable`,
  `add_spectator` and `inputs`. It also defines the exceptions `MVAError`,
  `NotInitializedError` and `InvalidInputError`.
- `hwwval.electron_id_inputs`: the `ElectronIDVariables` dataclass and
  `mva_bin(eta, pt)`, which gives six bins. It also has
  `reader_variables(version, bin_index)` for versions 1 to 3, and
  `isolation_inputs(variables, rho)`, which returns isolation corrected for
  pile-up and divided by pt.
- `hwwval.egamma_variables`: `MVAType` (`TRIG`, `NON_TRIG`, `ISO_RINGS`), the
  `ElectronMVAVariables` dataclass and `bind_variables` to clip diverging
  inputs. It also has `electron_d0_pv`, `reader_layout` and `mva_bin_for`.
- `hwwval.electron_id_mva`: the `ElectronIDMVA` classifier front end.
- `hwwval.egamma_mva`: the `EGammaMvaEleEstimator` classifier front end. It can
  run binned or unbinned.
- `hwwval.tracks`: `LorentzVector`, `Vertex` and `Track`. A `Track` has `pt`,
  `p`, `eta`, `phi`, `d0`, `dxy` and `dz`. `first_good_vertex(vertices)`
  returns `(index, vertex)` or `None`.
- `hwwval.pf_isolation`: the particle-flow isolation sums
  `electron_iso_value_pf` and `pf_isolation_2012`, plus `delta_phi` and
  `delta_r`. Their inputs are `PFCandidate`, `IsolationElectron` and
  `ParticleId`.
- `hwwval.records`: `EventRecord` and `GsfTrackRecord`, built with
  `make_event_record`, `make_gsf_track_record` and `make_gsf_track_records`.

## Installation

```
pip install .
```

## Examples

```python
from hwwval.muon_effective_area import (
    MuonEffectiveAreaTarget,
    MuonEffectiveAreaType,
    muon_effective_area,
)
from hwwval.electron_effective_area import (
    ElectronEffectiveAreaType,
    electron_effective_area,
)

muon_effective_area(
    MuonEffectiveAreaType.GAMMA_ISO_04, 0.5, MuonEffectiveAreaTarget.DATA_2012
)  # 0.50419
electron_effective_area(ElectronEffectiveAreaType.GAMMA_ISO_03, 1.2)  # 0.052
```

### Classifiers

The classifier classes do not evaluate trained models themselves. You pass a
`reader_factory` to `initialize`. It is called once per bin with the method
name, the weights file and the bin's `ReaderSpec`. It must return a callable
that takes the tuple of input values in `spec.variables` order and returns the
response.

```python
from hwwval.electron_id_inputs import ElectronIDVariables
from hwwval.electron_id_mva import ElectronIDMVA

def reader_factory(method_name, weights_file, spec):
    return lambda inputs: sum(inputs)  # stand-in for a trained model

mva = ElectronIDMVA()
mva.initialize(
    "BDTG method", 1, [f"bin{i}.weights.xml" for i in range(6)], reader_factory
)
score = mva.mva_value(ElectronIDVariables(pt=25.0, eta=0.5, deta_in=0.01))
```

In some cases the classes raise `hwwval.mva.InvalidInputError`:

- an unsupported version is given;
- the wrong number of weights files is given;
- an input value is missing.

Evaluating before `initialize` raises `hwwval.mva.NotInitializedError`.

## What the package does not do

- It does not read event data or reconstruction output. It works on values and
  dataclasses that you fill in yourself.
- It does not provide calorimeter fiduciality or electron-type bit masks.
- It does not assemble full per-electron records.
- It does not train or evaluate boosted decision trees. That is left to the
  evaluator that your `reader_factory` returns.
- It has no command-line program.

## Tests

```
pip install .[test]
pytest
```