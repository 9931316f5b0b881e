"""HTTP quote API for the bonding curve."""
