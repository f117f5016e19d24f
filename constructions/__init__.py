# constructions/__init__.py
"""
Phrase constructions built on top of a declension engine:

- noun_phrase: determiner + adjective + noun
- preposition_phrase: preposition (+ fused article) + noun
- slots: realization of a single pattern slot
"""
