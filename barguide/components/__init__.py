"""
Components.
"""
