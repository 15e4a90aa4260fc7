"""
Supporting services for the move kernel.
"""
