"""Pure business rules (input normalization, uniqueness checks) with no I/O."""
