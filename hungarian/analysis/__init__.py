"""Plots for assignments and benchmark runs."""
