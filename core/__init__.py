"""
Core package - dependency wiring, logging setup and utilities.
"""
