"""
# Contention based test primitives used by the test modules of &civil.
"""
