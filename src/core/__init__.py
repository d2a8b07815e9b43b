"""
Core arithmetic: limb primitives, fixed-point numbers, and result contracts.

This package is independent of the series and driver layers built on top
of it.
"""
