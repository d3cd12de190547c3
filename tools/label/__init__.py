"""
GS1-128 label generation tool.
"""
