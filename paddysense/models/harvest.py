"""Harvest yield reference values (bags of paddy per acre).

Benchmarks from average panicle counts and grain weight: 20-25 bags/acre is
a low yield, 30-35 average and 40+ high.
"""

from __future__ import annotations

BAG_WEIGHT_KG = 75

BAGS_PER_ACRE_MIN = 15
BAGS_PER_ACRE_MAX = 60
BAGS_PER_ACRE_AVERAGE = 30
