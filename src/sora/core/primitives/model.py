# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Users, offices, contracts and identifiers are immutable once created.
    The only mutable runtime state is the contract list owned by a single
    simulation run, which lives outside of models.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; hashable so they can key dicts and sets
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
