"""
barguide: bar tier inference and tier-gated section assembly.
"""
