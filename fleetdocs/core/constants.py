"""Core constants: alert tier thresholds and shared literal values.

Single source of truth for the fixed day thresholds used by the visual
severity classification. Per-type notification thresholds live on the
document type definitions (alert_days_before), not here.
"""

# Visual severity tiers (days until expiry, inclusive upper bounds)
CRITICAL_MAX_DAYS = 7
URGENT_MAX_DAYS = 30
WARNING_MAX_DAYS = 90

# Sort placeholder for alerts without a day count (sorts after any real value)
MISSING_DAYS_SORT_VALUE = 999

# Compliance percentage bounds
COMPLIANCE_MIN_PERCENT = 0
COMPLIANCE_MAX_PERCENT = 100
