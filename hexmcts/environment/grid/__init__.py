# File: hexmcts/environment/grid/__init__.py
