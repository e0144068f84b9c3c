# -*- coding: utf-8 -*-
# Part of Nodeproxy. See LICENSE file for full copyright and licensing details.

""" NODEPROXY core library. """

import sys
MIN_PY_VERSION = (3, 10)
assert sys.version_info > MIN_PY_VERSION, f"Outdated python version detected, Nodeproxy requires Python >= {'.'.join(map(str,  MIN_PY_VERSION))} to run."


# ----------------------------------------------------------
# Imports
# ----------------------------------------------------------
from . import release
from . import tools
from . import netsvc
from . import exceptions
from . import fields
from . import models
from . import api
from . import builder
from . import registry
from . import proxy

# ----------------------------------------------------------
# Shortcuts
# ----------------------------------------------------------
from .api import ConstructorArgsResolver, AttributeArgsResolver
from .exceptions import ProxyError, ContractViolation, UnsupportedTypeError, SynthesisError
from .fields import browsable, property_grid
from .proxy import create_readonly_view, is_readonly_view, select_view
