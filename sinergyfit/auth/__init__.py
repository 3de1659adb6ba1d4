# -*- coding: utf-8 -*-
"""Email/password accounts gating the per-user collections."""
