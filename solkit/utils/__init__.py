# solkit/utils/__init__.py
