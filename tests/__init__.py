"""
Test suite for PyFastNoise package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for individual functions and classes
- Integration tests for complete workflows
- Property sweeps over sampled coordinates (marked slow)

Run with: pytest
"""