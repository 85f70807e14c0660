"""Rank-test backends."""
