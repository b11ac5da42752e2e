"""Scoring module for the ESG scoring platform.

Implements the ESG aggregation pipeline:
  option score resolution → section aggregation (sum / average /
  weighted_average) → overall score (weighted or positive-mean branch)
"""
