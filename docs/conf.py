# Sphinx configuration for the tracer API reference.

import os
import sys
sys.path.insert(0, os.path.abspath('../src'))

from lambda_trigger_tracer import __version__  # noqa: E402

project = 'Lambda Trigger Tracer'
author = 'Lambda Trigger Tracer contributors'
release = __version__

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx_autodoc_typehints',
]

exclude_patterns = ['_build']
html_theme = 'sphinx_rtd_theme'

# Extractors and classification rules read best in source order.
autodoc_member_order = 'bysource'
autodoc_default_options = {'members': True, 'undoc-members': False}

# boto3 is an optional extra; the docs build without it.
autodoc_mock_imports = ['boto3']

napoleon_numpy_docstring = False
