from .envelope import Envelope, RawEnvelope
from .requests import ExactInParams, ExactOutParams, SlippageParams
from .responses import (
    ExactInOutData,
    GasPriceData,
    Route,
    Scalar,
    ScalarOrList,
    SlippageData,
    Step,
    Volatilities,
    as_list,
)

__all__ = [
    "Envelope",
    "RawEnvelope",
    "ExactInParams",
    "ExactOutParams",
    "SlippageParams",
    "ExactInOutData",
    "GasPriceData",
    "Route",
    "Scalar",
    "ScalarOrList",
    "SlippageData",
    "Step",
    "Volatilities",
    "as_list",
]
