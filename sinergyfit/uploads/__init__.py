# -*- coding: utf-8 -*-
"""Image uploads for routines, exercises and recipes."""
