"""
Experiments Module

Benchmark configuration and CLI.

This module provides:
- YAML-based benchmark configuration loading
- Benchmark runner with packing verification and cross-variant checks
- Metrics collection and JSONL/CSV export
- Artifact storage and organization
- Typer command line interface
"""

__version__ = "0.1.0"
