# File: hexmcts/mcts/strategy/__init__.py
