"""
Core domain models, mathematical primitives, and invariants.

This module contains the foundational building blocks for planar orientation:
modular arithmetic helpers and the Turn/Direction/Basis/Range value types.
"""
