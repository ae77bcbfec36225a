# -*- coding: utf-8 -*-
#
# Copyright (C) 2007-2009 Christopher Lenz
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.

from couchview.client import Server, Database, Document
from couchview.views import ViewQuery, ViewResult, Row
from couchview.policy import AbortOnError
from couchview.logging import LOG_LEVELS, set_logging, logger
from couchview import exceptions

__version__ = '0.1.0'
