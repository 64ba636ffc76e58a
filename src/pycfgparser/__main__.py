# -*- encoding: utf-8 -*-
# @File   : __main__.py
# @Time   : 2024/10/14 20:31:09

import sys

from .cli import main

sys.exit(main())
