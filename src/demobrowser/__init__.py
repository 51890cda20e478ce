# -*- coding: utf-8 -*-
"""Navigation state and catalog curation for a component gallery."""

from demobrowser.constants import APP_VERSION

__version__ = APP_VERSION
