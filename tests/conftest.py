import matplotlib

# headless backend for the scan plot tests
matplotlib.use("Agg")
