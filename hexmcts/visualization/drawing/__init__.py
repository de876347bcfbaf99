# File: hexmcts/visualization/drawing/__init__.py
