from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict

# Project root (parent of this file)
BASE_DIR = Path(__file__).resolve().parent
CONFIG_PATH = BASE_DIR / "config.yaml"


def _load_yaml(path: Path = CONFIG_PATH) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            return {}
        return data


CFG = _load_yaml()


def _property(key: str, defaults: Dict[str, float]) -> Dict[str, float]:
    section = CFG.get(key) or {}
    if not isinstance(section, dict):
        section = {}
    return {name: float(section.get(name, value)) for name, value in defaults.items()}


# Policy
CLOSING_COST_PCT: float = float(CFG.get("closing_cost_pct", 3.0))
MAX_DEBT_TO_INCOME_PCT: float = float(CFG.get("max_debt_to_income_pct", 36.0))
COMPARISON_TERM_YEARS: int = int(CFG.get("comparison_term_years", 30))
SCHEDULE_PREVIEW_ROWS: int = int(CFG.get("schedule_preview_rows", 24))

# Mortgage
MORTGAGE_PRICE: float = float(CFG.get("mortgage_price", 300_000))
MORTGAGE_DOWN_PAYMENT: float = float(CFG.get("mortgage_down_payment", 60_000))
MORTGAGE_RATE: float = float(CFG.get("mortgage_rate", 4.5))
MORTGAGE_YEARS: int = int(CFG.get("mortgage_years", 30))

# Affordability
AFFORDABILITY_INCOME: float = float(CFG.get("affordability_income", 75_000))
AFFORDABILITY_DEBTS: float = float(CFG.get("affordability_debts", 500))
AFFORDABILITY_DOWN_PCT: float = float(CFG.get("affordability_down_pct", 20))
AFFORDABILITY_RATE: float = float(CFG.get("affordability_rate", 4.5))
AFFORDABILITY_YEARS: int = int(CFG.get("affordability_years", 30))

# Rental ROI
RENTAL_PRICE: float = float(CFG.get("rental_price", 300_000))
RENTAL_DOWN_PAYMENT: float = float(CFG.get("rental_down_payment", 75_000))
RENTAL_RATE: float = float(CFG.get("rental_rate", 5))
RENTAL_RENT: float = float(CFG.get("rental_rent", 2_000))
RENTAL_EXPENSES: float = float(CFG.get("rental_expenses", 400))

# Compare
PROPERTY_1: Dict[str, float] = _property(
    "property_1",
    {"price": 300_000, "down_payment": 60_000, "rate": 4.5, "rent": 2_000, "expenses": 500},
)
PROPERTY_2: Dict[str, float] = _property(
    "property_2",
    {"price": 250_000, "down_payment": 50_000, "rate": 4.5, "rent": 1_800, "expenses": 450},
)

# Schedule
SCHEDULE_LOAN: float = float(CFG.get("schedule_loan", 240_000))
SCHEDULE_RATE: float = float(CFG.get("schedule_rate", 4.5))
SCHEDULE_YEARS: int = int(CFG.get("schedule_years", 30))
