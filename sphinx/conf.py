#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# PyFrac documentation build configuration file

import os
import sys
sys.path.insert(1, os.path.abspath('..'))

import frac_version

# -- General configuration ------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.doctest',
    'sphinx.ext.todo',
]

templates_path = ['_templates']
source_suffix = '.rst'
master_doc = 'index'

project = 'PyFrac'
copyright = '2025, The PyFrac Developers'
author = 'The PyFrac Developers'

version = frac_version.version
release = frac_version.version

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

# The name of the Pygments (syntax highlighting) style to use.
pygments_style = 'sphinx'

# If true, `todo` and `todoList` produce output, else they produce nothing.
todo_include_todos = True


# -- Options for HTML output ----------------------------------------------

html_theme = 'classic'
