"""Airport simulation: planes landing and taking off under random storms."""
