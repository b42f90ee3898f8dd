"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to graph sources (CSV files, in-memory
records) and to the edge cost strategy.
"""
