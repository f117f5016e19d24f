# app/core/domain/__init__.py
