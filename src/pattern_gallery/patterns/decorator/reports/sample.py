"""Sample figures shared by both report variants."""
from typing import Any, Dict, List

SAMPLE_DATA: List[Dict[str, Any]] = [
    {"name": "Revenue", "value": "120,000 €"},
    {"name": "Expenses", "value": "95,000 €"},
    {"name": "Profit", "value": "25,000 €"},
    {"name": "Customers", "value": 250},
    {"name": "Projects", "value": 15},
]


def csv_escape(value: Any) -> str:
    text = str(value)
    return f'"{text}"' if "," in text else text
