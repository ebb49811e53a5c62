"""Application services layer.

Services coordinate work across domains and infrastructure (catalog lookups,
availability checks, search state). They should avoid UI concerns.
"""
