"""Analytics report CLI — the host around the fitness_analytics core."""
