"""Report building package."""

from taxledger.reports.service import TaxReportService
from taxledger.reports.summaries import input_vat, output_vat, vat_summary, wht_summary

__all__ = [
    "TaxReportService",
    "input_vat",
    "output_vat",
    "vat_summary",
    "wht_summary",
]
