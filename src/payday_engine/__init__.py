"""Payroll tracking engine for small businesses.

Monthly pay with weekly holiday allowance, night premiums, flat-rate
withholding and cash advances, plus payday reminders.
"""

__version__ = "0.1.0"
