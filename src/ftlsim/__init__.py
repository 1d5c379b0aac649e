"""
FTLSim - Flash Translation Layer wear-leveling simulator

A Python-based simulation of the core FTL logic:
- Logical-to-physical (L2P) block mapping
- Least-worn block selection (wear leveling)
- Wear counting and dead-block retirement
- Wear distribution statistics, reporting and benchmarking
"""

__version__ = "0.1.0"
__author__ = "FTLSim Team"
