# File: hexmcts/environment/logic/__init__.py
