"""
Test suite for Product Catalog Builder.

Run with:
    python run_tests.py
or:
    python -m pytest tests/
"""
