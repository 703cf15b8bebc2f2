"""Multiplicative evaluation domains and their folded, scaled versions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


@dataclass(frozen=True)
class EvaluationDomain:
    """A coset offset * <group_gen> of power-of-two size over `field`."""

    field: type
    size: int
    log_size_of_group: int
    size_as_field_element: Any
    size_inv: Any
    group_gen: Any
    group_gen_inv: Any
    offset: Any
    offset_inv: Any
    offset_pow_size: Any

    @classmethod
    def for_size(cls, field: type, size: int) -> "EvaluationDomain":
        """Smallest power-of-two subgroup holding at least `size` points.

        Raises ValueError when the field has no subgroup that large.
        """
        if size < 0:
            raise ValueError("domain size must not be negative")
        domain_size = 1 << max(size - 1, 0).bit_length()
        log_size = _trailing_zeros(domain_size)
        if log_size > field.TWO_ADICITY:
            raise ValueError(
                f"{field.__name__} has no multiplicative subgroup of size {domain_size}"
            )
        group_gen = field.root_of_unity(domain_size)
        size_as_field_element = field(domain_size)
        one = field(1)
        return cls(
            field=field,
            size=domain_size,
            log_size_of_group=log_size,
            size_as_field_element=size_as_field_element,
            size_inv=size_as_field_element.inverse(),
            group_gen=group_gen,
            group_gen_inv=group_gen.inverse(),
            offset=one,
            offset_inv=one,
            offset_pow_size=one,
        )


@dataclass(frozen=True)
class Domain:
    """Evaluation domain of the protocol.

    `base_domain` is the initial domain in the base prime field (only kept
    for the starting domain); `backing_domain` is the same domain over the
    working field.
    """

    base_domain: Optional[EvaluationDomain]
    backing_domain: EvaluationDomain

    @classmethod
    def new(cls, field: type, degree: int, log_rho_inv: int) -> "Domain":
        """Domain for polynomials of `degree` at rate 2**-log_rho_inv."""
        size = degree * (1 << log_rho_inv)
        base_domain = EvaluationDomain.for_size(field.BASE, size)
        return cls(
            base_domain=base_domain,
            backing_domain=_to_extension_domain(field, base_domain),
        )

    def folded_size(self, folding_factor: int) -> int:
        """Size after folding `folding_factor` times."""
        fold = 1 << folding_factor
        if self.size() % fold:
            raise ValueError(
                f"domain size {self.size()} is not divisible by {fold}"
            )
        return self.size() // fold

    def size(self) -> int:
        """Number of points in the domain."""
        return self.backing_domain.size

    def scale(self, power: int) -> "Domain":
        """Domain generated by group_gen**power; it has size / power points."""
        return Domain(base_domain=None, backing_domain=self._scale_generator_by(power))

    def _scale_generator_by(self, power: int) -> EvaluationDomain:
        starting_size = self.size()
        if power <= 0 or starting_size % power:
            raise ValueError(
                f"domain size {starting_size} is not divisible by {power}"
            )
        backing = self.backing_domain
        field = backing.field
        new_size = starting_size // power
        size_as_field_element = field(new_size)
        group_gen = backing.group_gen**power
        offset = backing.offset**power
        return EvaluationDomain(
            field=field,
            size=new_size,
            log_size_of_group=_trailing_zeros(new_size),
            size_as_field_element=size_as_field_element,
            size_inv=size_as_field_element.inverse(),
            group_gen=group_gen,
            group_gen_inv=group_gen.inverse(),
            offset=offset,
            offset_inv=backing.offset_inv**power,
            offset_pow_size=offset**new_size,
        )


def _to_extension_domain(field: type, domain: EvaluationDomain) -> EvaluationDomain:
    embed = field.from_base
    return EvaluationDomain(
        field=field,
        size=domain.size,
        log_size_of_group=domain.log_size_of_group,
        size_as_field_element=embed(domain.size_as_field_element),
        size_inv=embed(domain.size_inv),
        group_gen=embed(domain.group_gen),
        group_gen_inv=embed(domain.group_gen_inv),
        offset=embed(domain.offset),
        offset_inv=embed(domain.offset_inv),
        offset_pow_size=embed(domain.offset_pow_size),
    )