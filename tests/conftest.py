"""Shared test setup for the solar_ratio test suite."""

import matplotlib

# Render plots off-screen during tests
matplotlib.use("Agg")
