"""Regression backends."""
