# tests/core/__init__.py
