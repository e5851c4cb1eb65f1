from .variant_payloads import variant_result_to_loggable

__all__ = ["variant_result_to_loggable"]
