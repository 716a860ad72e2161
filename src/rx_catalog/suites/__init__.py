# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shape suites for individual catalog components."""

from __future__ import annotations

from .react import REACT_SUITE, ReactContext, load_react_context, run_react_suite

__all__ = ["REACT_SUITE", "ReactContext", "load_react_context", "run_react_suite"]
