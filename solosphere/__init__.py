"""SoloSphere job-bidding marketplace API."""
