# File: hexmcts/visualization/core/__init__.py
