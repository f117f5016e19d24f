# tests/__init__.py
"""
Test Suite for the Phrase Trainer

Organization:
- engine tables and rules (German, Czech)
- phrase constructions and slot dispatch
- orchestration, answer checking and configuration loading
- use case and CLI
"""
