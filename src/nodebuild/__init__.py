"""nodebuild: build steps for node packages.

Copies node and credential icons into ``dist/`` and generates localized
header and translation bundles for the configured locale.
"""

__version__ = "0.1.0"
