"""Command line interface for bwdraw."""
