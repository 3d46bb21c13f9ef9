from .exchange_info import EquipmentProvider, ExchangeInfo, convert_primary_fields

__all__ = [
    "EquipmentProvider",
    "ExchangeInfo",
    "convert_primary_fields",
]
