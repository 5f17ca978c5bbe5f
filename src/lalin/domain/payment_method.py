from enum import Enum
from typing import Dict, List

from ...common.exceptions import ValidationError


class PaymentMethod(str, Enum):
    """
    Payment-method dimension of the daily report.
    """
    TUNAI = "Tunai"
    ETOLL = "EToll"
    FLO = "Flo"
    KTP = "KTP"
    KESELURUHAN = "Keseluruhan"
    ETF = "ETF"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def tab_name(self) -> str:
        return _TAB_NAMES[self]

    @classmethod
    def parse(cls, value: str) -> "PaymentMethod":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError([f"Invalid payment method: {value}"])

    @classmethod
    def all_methods(cls) -> List["PaymentMethod"]:
        return list(cls)

    @classmethod
    def display_names(cls) -> Dict[str, str]:
        return {m.value: m.display_name for m in cls}

    @classmethod
    def tab_names(cls) -> Dict[str, str]:
        return {m.value: m.tab_name for m in cls}


_DISPLAY_NAMES = {
    PaymentMethod.TUNAI: "Tunai",
    PaymentMethod.ETOLL: "E-Toll",
    PaymentMethod.FLO: "Flo",
    PaymentMethod.KTP: "KTP",
    PaymentMethod.KESELURUHAN: "Keseluruhan",
    PaymentMethod.ETF: "E-Toll+Tunai+Flo",
}

_TAB_NAMES = {
    PaymentMethod.TUNAI: "Total Tunai",
    PaymentMethod.ETOLL: "Total E-Toll",
    PaymentMethod.FLO: "Total Flo",
    PaymentMethod.KTP: "Total KTP",
    PaymentMethod.KESELURUHAN: "Total Keseluruhan",
    PaymentMethod.ETF: "Total E-Toll+Tunai+Flo",
}
