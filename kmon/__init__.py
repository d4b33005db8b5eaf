"""Kernel device metrics browser."""
