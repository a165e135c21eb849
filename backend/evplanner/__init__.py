"""EVPlanner - catalog and infrastructure map planning backend."""
