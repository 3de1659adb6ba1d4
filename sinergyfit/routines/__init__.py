# -*- coding: utf-8 -*-
"""Workout routines: seed catalog merged with the user's own routines."""
