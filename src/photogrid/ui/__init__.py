"""
PhotoGrid - UI Package

User-interface modules for the photo grid.
"""
