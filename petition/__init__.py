"""Lista podpisów pod petycją."""
