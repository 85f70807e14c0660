"""Robust statistics backends."""
