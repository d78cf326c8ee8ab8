"""Application layer: reporters, shape-rule reporting and check groups."""
