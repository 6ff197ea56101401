import matplotlib

# plots are only written to files during tests
matplotlib.use("Agg")
