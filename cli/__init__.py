"""
Arabic Root Index: CLI
=======================
Terminal rendering for main.py.
"""
