"""Investment totals and payback."""

from retrofit_savings.finance.investment import selected_options, total_investment
from retrofit_savings.finance.payback import payback_period

__all__ = ["payback_period", "selected_options", "total_investment"]
