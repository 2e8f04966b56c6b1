# Sphinx configuration for the ledger_asset API reference.
#
# Build with: sphinx-build -b html docs/source docs/build

import os
import sys

# Make `ledger_asset` importable by autodoc without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../../')))

project = 'Ledger Asset Record'
author = 'Ledger Asset Record contributors'
release = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',          # Google-style Args/Returns/Raises sections
    'sphinx_autodoc_typehints',
]

html_theme = 'sphinx_rtd_theme'

# Pydantic models document their fields as attribute docstrings
autoclass_content = 'class'
autodoc_member_order = 'bysource'
autodoc_default_options = {
    'members': True,
    'show-inheritance': True,
}
