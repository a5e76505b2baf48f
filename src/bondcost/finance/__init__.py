"""Bond repayment property tax calculations.

Provides the amortization solver, exemption aggregation, and the property
tax engine that composes them.
"""

from bondcost.finance.amortization import solve_annual_payment, summarize_bond
from bondcost.finance.exemptions import ExemptionAggregator, total_exemptions
from bondcost.finance.taxes import PropertyTaxEngine

__all__ = [
    "ExemptionAggregator",
    "PropertyTaxEngine",
    "solve_annual_payment",
    "summarize_bond",
    "total_exemptions",
]
