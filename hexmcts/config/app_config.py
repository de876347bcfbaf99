# File: hexmcts/config/app_config.py
APP_NAME: str = "HexMCTS"
