"""Service contracts.

Each resource service implements one `Protocol` from here, so callers and
tests can depend on the shape instead of the concrete class.
"""
