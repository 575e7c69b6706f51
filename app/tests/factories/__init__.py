"""Factory functions for test data.

Factories return plain domain objects, dicts shaped like backend JSON,
or small fakes standing in for collaborators.
"""
