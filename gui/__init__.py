"""Tkinter front-end for the Valet license catalog.

Modules that only hold state or wire services together avoid creating a Tk
root at import time, so they can be imported in headless test runs.
"""
