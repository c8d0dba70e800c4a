"""
Integration tests for the number-theory engine
"""
