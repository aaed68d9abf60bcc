from .base import Attempt, ProviderAdapter
from .fires import FireAdapter
from .sar import SarAdapter
from .vegetation import VegetationAdapter
from .weather import WeatherAdapter

__all__ = [
    "Attempt", "ProviderAdapter",
    "SarAdapter", "VegetationAdapter", "FireAdapter", "WeatherAdapter",
]
