"""
Boundary layer: adapters to external systems (the backing store).
"""
