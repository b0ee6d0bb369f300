# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Persistence of users, offices and contracts, and read-only table dumps.
"""

from .show import Aggregate, ShowFilter, render, show
from .store import TABLES, Store

__all__ = [
    "Store",
    "TABLES",
    "Aggregate",
    "ShowFilter",
    "show",
    "render",
]
