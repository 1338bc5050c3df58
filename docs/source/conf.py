# Sphinx configuration for scikit-ellipsoid documentation
#
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import sys
from skellipsoid import __version__

sys.path.append("../skellipsoid")

project = 'scikit-ellipsoid'
copyright = '2024, Sebastian Luque'
author = 'Sebastian Luque'
version = __version__
release = version

extensions = [
    'sphinx.ext.doctest',
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.autosummary',
    'sphinx.ext.intersphinx',
    'sphinx.ext.napoleon',
    'sphinx.ext.mathjax'
]

master_doc = 'index'
exclude_patterns = ['Thumbs.db', '.DS_Store']
pygments_style = 'sphinx'

# autodoc
autodoc_default_options = {
    'members': True,
    'member-order': 'groupwise'
}

html_theme = 'bizstyle'
htmlhelp_basename = 'skellipsoid_doc'

latex_documents = [
    (master_doc, 'index', 'skellipsoid.tex',
     u'scikit-ellipsoid Documentation', u'Sebastian Luque', 'manual'),
]

# Intersphinx
intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable', None),
    'scipy': ('https://docs.scipy.org/doc/scipy/reference', None),
    'matplotlib': ('https://matplotlib.org/stable', None),
    'xarray': ('https://docs.xarray.dev/en/stable/', None),
}
