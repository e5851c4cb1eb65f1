from .variants import VariantSynchronizer, option_value_code, option_value_display

__all__ = ["VariantSynchronizer", "option_value_code", "option_value_display"]
