"""Test suite for tweenease.

Test Structure:
- unit/curves/functions/: Curve formulas, shared curve properties, precision
- unit/curves/: Identifiers, taxonomy, name matching, lookup, sampling
- unit/config/: Config models and loaders
- unit/utils/: Logging utilities
- conftest.py: Shared fixtures
"""
