"""Finite fields, transforms, multilinear polynomials and Keccak Merkle hashing for WHIR-style proofs."""

__version__ = "0.1.0"