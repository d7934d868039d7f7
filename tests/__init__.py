"""
Tests for ClarityCanvas.

Run with:
    pytest tests/ -v
"""
