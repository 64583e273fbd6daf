"""Dataset generation and experiment runner."""
