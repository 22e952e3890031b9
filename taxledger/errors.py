"""
Engine exceptions.

Calculators never raise on bad numbers (they coerce to zero). These
exceptions are for programmer misuse of the report layer only.
"""


class TaxLedgerError(Exception):
    """Base error for taxledger."""
    pass


class ReportError(TaxLedgerError):
    """A report was requested for inputs it cannot be built from."""
    pass
