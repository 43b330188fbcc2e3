# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""JSON schemas describing the compiler artifacts consumed by soldocgen."""
