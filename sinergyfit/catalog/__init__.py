# -*- coding: utf-8 -*-
"""Seed catalog (built-in routines and recipes) and its reconciliation with user records."""

from .reconcile import collision_key, reconcile
from .seed import get_seed, preloaded_recipes, preloaded_routines

__all__ = ["collision_key", "reconcile", "get_seed", "preloaded_recipes", "preloaded_routines"]
