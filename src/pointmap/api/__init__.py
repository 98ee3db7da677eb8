"""
HTTP application for Pointmap
"""
