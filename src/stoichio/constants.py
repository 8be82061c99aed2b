"""Shared constants."""

# Reserved key holding the electric charge in parsed formulas.
CHARGE_SYMBOL = "Z"
