"""Shared utilities for USpin core modules."""
