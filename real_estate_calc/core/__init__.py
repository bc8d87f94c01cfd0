from .amortization import (
	monthly_payment,
	amort_schedule,
	aggregate_yearly,
	summarize,
	schedule_preview,
	AmortizationSummary,
)
from .affordability import affordability, AffordabilityResult
from .rental import (
	compare_property,
	compare_properties,
	property_metrics,
	PropertyInputs,
	PropertyMetrics,
	ComparisonOutcome,
)
from .export import schedule_to_csv, write_schedule_csv, default_export_filename
from .exceptions import RealEstateCalcError, ExportError
from .utils import currency, whole_currency, percent, parse_number

__all__ = [
	"monthly_payment",
	"amort_schedule",
	"aggregate_yearly",
	"summarize",
	"schedule_preview",
	"AmortizationSummary",
	"affordability",
	"AffordabilityResult",
	"compare_property",
	"compare_properties",
	"property_metrics",
	"PropertyInputs",
	"PropertyMetrics",
	"ComparisonOutcome",
	"schedule_to_csv",
	"write_schedule_csv",
	"default_export_filename",
	"RealEstateCalcError",
	"ExportError",
	"currency",
	"whole_currency",
	"percent",
	"parse_number",
]
