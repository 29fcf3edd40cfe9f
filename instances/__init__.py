"""
Instances Module

Problem instances for the bin packing heuristics.

This module provides:
- Problem instance model and named instance sets
- Deterministic uniform and Weibull instance generation
- OR-Library benchmark file parsing and download cache
- Plain item file reading and writing
"""

__version__ = "0.1.0"

from .datasets import (
    ORLIB_FILES,
    InstanceSet,
    ProblemInstance,
    generate_instance_set,
    generate_uniform_instance,
    generate_weibull_instance,
    instance_summary,
    load_items_file,
    load_orlib_dataset,
    parse_orlib_file,
    save_items_file,
)

__all__ = [
    "ORLIB_FILES",
    "InstanceSet",
    "ProblemInstance",
    "generate_instance_set",
    "generate_uniform_instance",
    "generate_weibull_instance",
    "instance_summary",
    "load_items_file",
    "load_orlib_dataset",
    "parse_orlib_file",
    "save_items_file",
]
