import pytest

from whirkit.fields import Field64
from whirkit.parameters import FoldType
from whirkit.poly.coeffs import CoefficientList
from whirkit.poly.fold import compute_fold, restructure_evaluations
from whirkit.poly.multilinear import MultilinearPoint

F = Field64


def _stack_evaluations(evals, folding_factor):
    size = 1 << folding_factor
    new_size = len(evals) // size
    return [evals[i + j * new_size] for i in range(new_size) for j in range(size)]


def test_folding():
    num_variables = 5
    num_coeffs = 1 << num_variables
    domain_size = 256
    folding_factor = 3
    folding_factor_exp = 1 << folding_factor

    poly = CoefficientList([F(i) for i in range(num_coeffs)])
    root_of_unity = F.root_of_unity(domain_size)
    index = 15
    folding_randomness = [F(i) for i in range(folding_factor)]

    coset_offset = root_of_unity**index
    coset_gen = root_of_unity ** (domain_size // folding_factor_exp)

    poly_eval = [
        poly.evaluate(
            MultilinearPoint.expand_from_univariate(
                coset_offset * coset_gen**i, num_variables
            )
        )
        for i in range(folding_factor_exp)
    ]

    fold_value = compute_fold(
        poly_eval,
        folding_randomness,
        coset_offset.inverse(),
        coset_gen.inverse(),
        F(2).inverse(),
        folding_factor,
    )

    truth_value = poly.fold(MultilinearPoint(folding_randomness)).evaluate(
        MultilinearPoint.expand_from_univariate(
            root_of_unity ** (folding_factor_exp * index), 2
        )
    )
    assert fold_value == truth_value


def test_folding_optimised():
    num_variables = 5
    num_coeffs = 1 << num_variables
    domain_size = 256
    folding_factor = 3
    folding_factor_exp = 1 << folding_factor

    poly = CoefficientList([F(i) for i in range(num_coeffs)])
    root_of_unity = F.root_of_unity(domain_size)
    root_of_unity_inv = root_of_unity.inverse()
    folding_randomness = [F(i) for i in range(folding_factor)]

    domain_evaluations = [
        poly.evaluate(
            MultilinearPoint.expand_from_univariate(root_of_unity**w, num_variables)
        )
        for w in range(domain_size)
    ]
    unprocessed = _stack_evaluations(domain_evaluations, folding_factor)
    processed = restructure_evaluations(
        unprocessed,
        FoldType.PROVER_HELPS,
        root_of_unity,
        root_of_unity_inv,
        folding_factor,
    )

    num = domain_size // folding_factor_exp
    coset_gen_inv = root_of_unity_inv**num
    for index in range(num):
        offset_inv = root_of_unity_inv**index
        span = slice(index * folding_factor_exp, (index + 1) * folding_factor_exp)
        answer_unprocessed = compute_fold(
            unprocessed[span],
            folding_randomness,
            offset_inv,
            coset_gen_inv,
            F(2).inverse(),
            folding_factor,
        )
        answer_processed = CoefficientList(processed[span]).evaluate(
            MultilinearPoint(folding_randomness)
        )
        assert answer_processed == answer_unprocessed


def test_naive_leaves_evaluations_unchanged():
    values = [F(i) for i in range(16)]
    result = restructure_evaluations(values, FoldType.NAIVE, F(1), F(1), 2)
    assert result == values


def test_prover_helps_does_not_modify_input():
    values = [F(i) for i in range(16)]
    root = F.root_of_unity(16)
    restructure_evaluations(values, FoldType.PROVER_HELPS, root, root.inverse(), 2)
    assert values == [F(i) for i in range(16)]


def test_restructure_rejects_partial_block():
    with pytest.raises(ValueError):
        restructure_evaluations([F(1)] * 6, FoldType.NAIVE, F(1), F(1), 2)


def test_compute_fold_rejects_wrong_answer_count():
    with pytest.raises(ValueError):
        compute_fold([F(1)] * 3, [F(1), F(2)], F(1), F(1), F(2).inverse(), 2)


def test_compute_fold_rejects_short_randomness():
    with pytest.raises(ValueError):
        compute_fold([F(1)] * 4, [F(1)], F(1), F(1), F(2).inverse(), 2)