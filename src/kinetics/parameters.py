"""
Configuration resolution: sparse user overrides on top of fixed defaults.
Validated with Pydantic v2 the same way analysis inputs are.
"""

from typing import Annotated, Dict, Mapping, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import settings
from src.kinetics.errors import ConfigurationError

# Alternate spellings used by older settings screens
ALIASES = {"TickRate": "StepTime"}

PositiveFloat = Annotated[float, Field(gt=0)]


class ParameterOverrides(BaseModel):
    """
    Validation model for user overrides.
    Every field is optional: a missing key simply falls back to the default.
    """

    model_config = ConfigDict(extra="ignore")

    Mass: Optional[float] = Field(None, description="Mass in kg")
    Resistance: Optional[float] = Field(None, description="Circuit resistance in Ω")
    V0: Optional[float] = Field(None, description="Starting velocity along Y in m/s")
    StepTime: Optional[PositiveFloat] = Field(None, description="Seconds between ticks")
    ChartLength: Optional[PositiveFloat] = Field(None, description="Seconds shown live")
    TableValueLength: Optional[Annotated[int, Field(ge=0)]] = Field(
        None, description="Decimals for presentation"
    )
    KE_0: Optional[float] = Field(None, description="Starting kinetic energy in J")


PARAMETER_NAMES = tuple(ParameterOverrides.model_fields)


class ConfigurationResolver:
    """
    Resolves parameter values: overrides[key] if present, else defaults[key].

    Overrides are validated once on construction; resolve() is a pure lookup
    and never mutates either mapping.
    """

    def __init__(
        self,
        overrides: Optional[Mapping[str, float]] = None,
        defaults: Optional[Mapping[str, float]] = None,
    ):
        if defaults is None:
            defaults = settings.default_parameters()
        self._defaults: Dict[str, float] = {k: float(v) for k, v in defaults.items()}
        self._overrides: Dict[str, float] = self._validate(overrides or {})

    def _validate(self, overrides: Mapping[str, float]) -> Dict[str, float]:
        known = set(self._defaults) | set(PARAMETER_NAMES)

        data = {}
        for key, value in overrides.items():
            name = ALIASES.get(key, key)
            if name not in known:
                logger.debug(f"Ignoring unrecognized parameter '{key}'")
                continue
            # an explicit spelling wins over its alias
            if name in data and key != name:
                continue
            data[name] = value

        try:
            model = ParameterOverrides.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        validated = {
            k: float(v) for k, v in model.model_dump().items() if v is not None
        }
        for name, value in data.items():
            if name not in PARAMETER_NAMES and value is not None:
                try:
                    validated[name] = float(value)
                except (TypeError, ValueError) as e:
                    raise ConfigurationError(
                        f"Parameter '{name}' must be numeric, got {value!r}"
                    ) from e
        return validated

    def resolve(self, key: str) -> float:
        name = ALIASES.get(key, key)
        if name in self._overrides:
            return self._overrides[name]
        if name in self._defaults:
            return self._defaults[name]
        raise ConfigurationError(f"Unknown parameter '{key}'")

    @property
    def overrides(self) -> Dict[str, float]:
        return dict(self._overrides)

    def effective(self) -> Dict[str, float]:
        """Every known parameter with its resolved value."""
        names = list(self._defaults) + [n for n in self._overrides if n not in self._defaults]
        return {name: self.resolve(name) for name in names}


def resolve(config: Optional[Mapping[str, float]], key: str) -> float:
    """Standalone lookup for presentation layers."""
    return ConfigurationResolver(config).resolve(key)
