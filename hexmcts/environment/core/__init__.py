# File: hexmcts/environment/core/__init__.py
