# -*- coding: utf-8 -*-
"""Per-user document collections, the write dispatcher and the record store adapter."""
