"""
Tests package for the accumulator number-theory engine

- Unit tests: individual primitives in isolation
- Integration tests: the primality pipeline and proof arithmetic end to end
"""
