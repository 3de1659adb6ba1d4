# -*- coding: utf-8 -*-
"""SinergyFit backend: workout routines, recipes and a weekly meal plan."""
