# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Sora Core Framework

Foundational building blocks for the office rental marketplace.
"""

from . import primitives

__all__ = ["primitives"]
