import json
import logging
import math

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class Legs(BaseModel):
    x: float = Field(..., allow_inf_nan=False)
    y: float = Field(..., allow_inf_nan=False)


class HypotenuseService:
    def compute(self, x: float, y: float) -> float:
        return math.hypot(x, y)

    def compute_from_body(self, body: bytes | str) -> float:
        """Parse ``{"x": ..., "y": ...}`` (keys in any case) and return the hypotenuse.

        Returns 0.0 when the body is not a JSON object with two finite numeric legs.
        """
        try:
            payload = json.loads(body)
            if isinstance(payload, dict):
                payload = self._lowercase_keys(payload)
            legs = Legs.model_validate(payload)
            result = self.compute(legs.x, legs.y)
            if not math.isfinite(result):
                raise ValueError(f'hypotenuse of ({legs.x}, {legs.y}) overflows')
        except (ValueError, ValidationError) as e:
            logger.error(f'Hypotenuse body could not be parsed: {e}')
            return 0.0
        return result

    @staticmethod
    def _lowercase_keys(payload: dict) -> dict:
        normalized = {}
        for key, value in payload.items():
            lowered = str(key).lower()
            if lowered in normalized:
                raise ValueError(f'duplicate field {lowered!r}')
            normalized[lowered] = value
        return normalized
