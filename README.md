# whirkit

Building blocks for WHIR-style polynomial commitment and low-degree-test
protocols, written in plain Python.

## What is in the package

- `whirkit.fields`: the prime fields `Field64` (Goldilocks), `Field128`,
  `Field192` and `Field256` (BN254 scalar field), and the Goldilocks
  extensions `Field64_2` (adjoining a square root of 7) and `Field64_3`
  (adjoining a cube root of 2). Elements support `+`, `-`, `*`, `/`, `**`
  and `inverse()`, mix with Python integers, and offer `root_of_unity(order)`,
  `two_adic_root_of_unity()`, `field_size_in_bits()`, `from_base()` and
  `to_bytes()`. `serialize_elements` encodes a sequence as a little-endian
  u64 count followed by each element's bytes.
- `whirkit.ntt.engine`: `NttEngine` (one cached per field through
  `NttEngine.from_cache(field)`) and the functions `ntt`, `intt`,
  `ntt_batch`, `intt_batch`, which work in place on lists of field
  elements. The inverse transforms do not apply the 1/n scaling.
  `expand_from_coeff(coeffs, expansion)` Reed–Solomon encodes at rate
  1/`expansion`.
- `whirkit.ntt.wavelet`: `wavelet_transform` and `wavelet_transform_batch`,
  which turn multilinear coefficients into hypercube evaluations.
- `whirkit.ntt.transpose` and `whirkit.ntt.matrix`: in-place transposition
  of power-of-two matrices stored in flat lists, over strided `MatrixView`s.
- `whirkit.ntt.utils`: `gcd`, `lcm`, `sqrt_factor`, `is_power_of_two`,
  `as_chunks_exact`, `workload_size`.
- `whirkit.domain`: `EvaluationDomain.for_size(field, size)` and `Domain`,
  with `Domain.new(field, degree, log_rho_inv)`, `size()`,
  `folded_size(folding_factor)` and `scale(power)`.
- `whirkit.poly`:
  - `hypercube`: `BinaryHypercubePoint` and `binary_hypercube(n)`.
  - `multilinear`: `MultilinearPoint` (with `from_binary_hypercube_point`,
    `to_hypercube`, `expand_from_univariate`, `rand`) and the equality
    polynomials `eq_poly`, `eq_poly_outside`, `eq_poly3`.
  - `coeffs`: `CoefficientList`, with `evaluate`, `evaluate_hypercube`,
    `evaluate_at_extension`, `evaluate_at_univariate`, `fold`,
    `to_extension` and `to_evaluations`.
  - `evals`: `EvaluationsList`, with `evaluate` and `eval_extension`.
  - `lagrange`, `gray`, `streaming`: iterators over the hypercube yielding
    Lagrange basis values (`lagrange_polynomial_iter`,
    `lagrange_polynomial_gray`) or monomial values (`term_polynomial_iter`),
    plus `gray_encode` and `gray_decode`.
  - `fold`: `compute_fold` and `restructure_evaluations`.
- `whirkit.keccak`: `KeccakDigest`, `KeccakLeafHash`, `KeccakTwoToOneHash`
  and `default_config`, hashing Merkle leaves and nodes with Keccak-256.
- `whirkit.merkle`: `HashCounter`, a process-wide count of hash calls, and
  the trivial `LeafIdentityHasher`, `IdentityDigestConverter`,
  `MockTwoToOneHash` and `default_mock_config`.
- `whirkit.parameters` and `whirkit.cmdline`: `SoundnessType`, `FoldType`,
  `MultivariateParameters`, `WhirParameters`, `default_max_pow`, and the
  option enums `WhirType`, `AvailableFields`, `AvailableMerkle`, each with a
  `parse` class method that raises `ValueError` on unknown names.

## Installation

```
pip install whirkit
```

## Example

```python
from whirkit.fields import Field64
from whirkit.poly.coeffs import CoefficientList
from whirkit.poly.multilinear import MultilinearPoint

poly = CoefficientList([Field64(c) for c in (22, 5, 10, 97)])
point = MultilinearPoint([Field64(42), Field64(36)])
value = poly.evaluate(point)

evaluations = poly.to_evaluations()
assert evaluations.evaluate(point) == value

folded = poly.fold(MultilinearPoint([Field64(36)]))
assert folded.evaluate(MultilinearPoint([Field64(42)])) == value
```

Transforms work in place on lists of field elements:

```python
from whirkit.fields import Field64
from whirkit.ntt.engine import ntt, intt

values = [Field64(i) for i in range(8)]
ntt(values)
intt(values)  # no 1/n scaling: every entry is now 8 times its original value
```

Hashing a Merkle leaf and counting hash calls:

```python
from whirkit.fields import Field64
from whirkit.keccak import KeccakLeafHash, KeccakTwoToOneHash
from whirkit.merkle import HashCounter

HashCounter.reset()
left = KeccakLeafHash().evaluate([Field64(1), Field64(2)])
right = KeccakLeafHash().evaluate([Field64(3), Field64(4)])
root = KeccakTwoToOneHash().compress(left, right)
assert HashCounter.get() == 3
```

## What the package does not do

The package holds the arithmetic and hashing pieces only. It has no
committer, prover or verifier, no Fiat–Shamir transcript, no Merkle tree
structure with authentication paths, and no command-line program or
benchmark runner. `WhirParameters` and the `whirkit.cmdline` enums describe
settings but nothing in the package runs a protocol from them. Blake3
appears only as the `AvailableMerkle.BLAKE3` option name; Keccak-256 is the
only real hash provided.

## Running the tests

```
pip install -e ".[test]"
pytest
```