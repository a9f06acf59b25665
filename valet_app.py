#!/usr/bin/env python3
"""
Valet - License Catalog GUI Entry Point
"""
from gui.app import main

if __name__ == "__main__":
    main()
