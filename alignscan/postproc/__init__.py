"""Report post-processing."""
