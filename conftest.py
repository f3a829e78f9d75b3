# Headless matplotlib for chart tests and examples.
import matplotlib

matplotlib.use("Agg")
