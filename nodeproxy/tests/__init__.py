# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

from . import test_api
from . import test_models
from . import test_proxy
from . import test_registry
from . import test_tools
