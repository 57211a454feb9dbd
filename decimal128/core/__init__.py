"""
Core codec, domain model and contracts for decimal128.

Everything here is a pure function of a 16-byte buffer: no I/O, no shared
mutable state.
"""
