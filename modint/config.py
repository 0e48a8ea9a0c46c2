"""Global configuration for modint."""

# ---------- Default modulus ----------
# Prime, and below 2**31 so the product of two canonical values stays
# below 2**62.  All ModInt arithmetic is mod MODULUS unless a subclass
# overrides it.
MODULUS = 1_000_000_007

# ---------- Bounds accepted for a custom modulus ----------
MIN_MODULUS = 3
MAX_MODULUS = 2**32  # exclusive
