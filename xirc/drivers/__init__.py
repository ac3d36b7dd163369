"""
Concrete xirc drivers.
"""
