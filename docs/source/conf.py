import os
import sys
import sphinx_rtd_theme
sys.path.insert(0, os.path.abspath('../..'))

project = 'PermTools'
copyright = '2026, The PermTools developers'
author = 'The PermTools developers'
release = '1.0'

extensions = ['sphinx_rtd_theme',
              'sphinx.ext.napoleon',
              'sphinx.ext.autodoc',
              'sphinx.ext.autosummary',
              ]

autosummary_generate = True
autodoc_member_order = 'bysource'

templates_path = ['_templates']
exclude_patterns = ["setup", "tests"]

html_theme = 'sphinx_rtd_theme'
html_static_path = ['_static']
