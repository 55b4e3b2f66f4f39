"""Light-cycle chase simulation over a launcher icon grid."""
