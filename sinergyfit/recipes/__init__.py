# -*- coding: utf-8 -*-
"""Recipes: seed catalog merged with the user's own recipes."""
