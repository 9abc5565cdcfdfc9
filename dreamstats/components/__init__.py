"""
Components package - pure, stateless domain logic.
"""
