# -*- coding: utf-8 -*-
"""Daily diet API: users, meals and diet metrics over a cookie session."""
