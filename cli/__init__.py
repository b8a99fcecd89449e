"""
GX700 command line interface.
"""
