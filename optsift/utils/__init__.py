#!/usr/bin/env python3
"""
Logging support: toml driven logger specs, and colour formatters.
"""
