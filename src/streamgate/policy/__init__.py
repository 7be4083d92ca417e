"""Admission policy: rule models, IPv4 helpers, loader and evaluator."""
