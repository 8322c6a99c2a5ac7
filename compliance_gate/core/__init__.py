"""Scoring pipeline: loading, scoring, building and persisting reports."""
