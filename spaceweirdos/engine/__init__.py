"""Cost engine and validation package."""

from spaceweirdos.engine.attribute_costs import InvalidAttributeLevelError, get_base_attribute_cost
from spaceweirdos.engine.cost_config import CostConfig
from spaceweirdos.engine.cost_engine import CostEngine
from spaceweirdos.engine.cost_modifiers import get_cost_modifier
from spaceweirdos.engine.error_categorization import generate_error_summary, group_errors
from spaceweirdos.engine.messages import MessageCatalog
from spaceweirdos.engine.validation_service import ValidationService

__all__ = [
    "CostConfig",
    "CostEngine",
    "InvalidAttributeLevelError",
    "MessageCatalog",
    "ValidationService",
    "generate_error_summary",
    "get_base_attribute_cost",
    "get_cost_modifier",
    "group_errors",
]
