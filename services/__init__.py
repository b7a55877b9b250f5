"""
services/ - Application Layer
=============================
Entry points a user interface calls to list, save and remove records.
"""
