"""
Unit tests for number-theory components

- test_tables.py: small-prime and square-residue tables
- test_primality.py: Baillie-PSW stages
- test_lucas.py: Jacobi symbol, discriminant selection, strong Lucas test
- test_modular.py: extended Euclid, Shamir's trick, congruence solving
- test_group.py: RSA group operations and parameter validation
- test_hash_to_prime.py: hash-to-prime conversion
- test_config.py / test_logging_config.py: ambient configuration
"""
