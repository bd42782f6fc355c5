#!/usr/bin/env python

from sitefolio.context import Context

context = Context.get()
logger = context.logger
