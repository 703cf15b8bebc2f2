"""Multilinear polynomials, hypercube iterators, equality polynomials and folding helpers."""