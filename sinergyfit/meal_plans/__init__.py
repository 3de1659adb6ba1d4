# -*- coding: utf-8 -*-
"""The per-user weekly meal plan (day x meal slot -> recipe)."""
