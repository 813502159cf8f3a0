"""
Combat resolution engine for a turn-based dungeon crawler.

This package decides whether an attack lands, how much damage it deals,
whether it crits or benefits from an ambush, and how status effects such as
poison, burning or paralysis affect combatants between turns.
"""
