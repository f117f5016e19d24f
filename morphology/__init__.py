# morphology/__init__.py
"""
Declension engines, one module per language family.

Callers should obtain engines through `router.get_declension_engine`
rather than importing the concrete classes.
"""
