"""
Adapters (implementations) for the trip planner ports.
"""
