# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.

from .config import config
from .func import *
from .cache import proxy_counter
