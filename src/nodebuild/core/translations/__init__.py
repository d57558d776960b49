"""Header and translation bundle generation for the ``build-translations`` task."""
