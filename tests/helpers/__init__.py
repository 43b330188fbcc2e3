# SPDX-License-Identifier: MIT
"""Helpers shared across the soldocgen test-suite."""
