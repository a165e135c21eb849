"""
EVPlanner - Services
"""
