# -*- coding: utf-8 -*-
"""Define project metadata
"""

__title__ = "hashbin"
__summary__ = "A minimal content-addressed blob store."
__url__ = "https://github.com/dgilland/hashbin"

__version__ = "0.1.0"

__install_requires__ = ["fs>=2.4", "setuptools<81"]
__tests_require__ = ["pytest", "hypothesis", "tox"]

__author__ = "Derrick Gilland"
__email__ = "dgilland@gmail.com"

__license__ = "MIT License"
