"""
brush-translate

Translation orchestration core for select-and-translate tools.
"""
__version__ = "0.1.0"
