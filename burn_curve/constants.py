"""Protocol constants for the burn bonding curve.

Centralizes supply, precision and fee parameters. These are fixed for the
lifetime of a deployment and are not runtime-configurable.
"""

# Token precision (6 decimals, 1 whole token = 10^6 base units)
DECIMALS = 6
TOKEN_UNIT = 10**DECIMALS

# Fixed total supply: one billion whole tokens
MAX_TOKEN_SUPPLY = 1_000_000_000 * TOKEN_UNIT

# Native currency precision (lamports)
LAMPORTS_PER_SOL = 10**9

# Fixed-point multiplier used by the curve power computation.
# Large enough that supply^4 stays well inside 128 bits after rescaling.
MULTIPLIER = 10**19

# Maps a raw supply onto the MULTIPLIER scale: supply * SUPPLY_MULTIPLIER
# is the fraction supply / MAX_TOKEN_SUPPLY expressed in MULTIPLIER units.
SUPPLY_MULTIPLIER = MULTIPLIER // MAX_TOKEN_SUPPLY

# Bisection stops once the bracket is this narrow (in token base units)
FIND_ROOT_MAX_ERROR = 10**5

# Swap fee: 1% of the native amount, rounded up
FEE_DENOMINATOR = 100

# Once remaining supply drops to 1% of the total, tokens may move freely
FREE_TRANSFER_THRESHOLD = MAX_TOKEN_SUPPLY * 1 // 100

# Market symbol rules
SYMBOL_MIN_LEN = 2
SYMBOL_MAX_LEN = 10
SYMBOL_BURN = "BURN"
