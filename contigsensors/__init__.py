#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ContigSensors v0.1.0

Package initialization and version metadata.

Author: ContigSensors Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from .version import __version__

__all__ = ["__version__"]

# ContigSensors v0.1.0
# Any usage is subject to this software's license.
