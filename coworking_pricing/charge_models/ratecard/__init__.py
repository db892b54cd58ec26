from .loader import load_rate_card, parse_rate_card
from .schema import RateCardDefinition

__all__ = ["load_rate_card", "parse_rate_card", "RateCardDefinition"]
