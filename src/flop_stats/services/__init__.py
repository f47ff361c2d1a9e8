"""Solver output loading, aggregation and reporting services."""
