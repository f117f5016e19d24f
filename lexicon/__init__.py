# lexicon/__init__.py
