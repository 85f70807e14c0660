"""Resampling backends."""
