# File: hexmcts/mcts/core/__init__.py
