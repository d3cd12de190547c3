"""
GS1 scan decoding tool.
"""
