"""
paracurve CLI - Command-line interface for curve runs.

Usage:
    paracurve run --count 1000000 --seed 42
    paracurve run --config config/run.yaml --print
    paracurve eval circle 2.0 --t 1.5
"""

__version__ = "1.0.0"
