# app/core/__init__.py
"""
Core Domain.

Grammar primitives, the pydantic data model and the use cases that sit
on top of the generation engine. Nothing in here touches the filesystem
except through `app.shared`.
"""
